from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Iterable

from loguru import logger

from alumni_admin.resources import ResourceDefinition

from .client import ResourceClient


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return "; ".join(str(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True)
    return str(value)


def _columns(records: Iterable[dict[str, Any]]) -> list[str]:
    columns: list[str] = []
    for record in records:
        for key in record:
            if key not in columns:
                columns.append(key)
    if "id" in columns:
        columns.remove("id")
        columns.insert(0, "id")
    return columns


async def collect_records(
    client: ResourceClient,
    resource: ResourceDefinition,
    *,
    query: str = "",
    limit: int | None = None,
) -> list[dict[str, Any]]:
    records: list[dict[str, Any]] = []
    async for record in client.iter_records(resource, query=query):
        records.append(record)
        if limit and len(records) >= limit:
            break
    return records


def write_records(records: list[dict[str, Any]], output: Path, *, fmt: str = "json") -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "json":
        output.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
        return
    if fmt != "csv":
        raise ValueError(f"Unsupported export format: {fmt}")
    columns = _columns(records)
    with output.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=columns)
        writer.writeheader()
        for record in records:
            writer.writerow({column: _cell(record.get(column)) for column in columns})


async def export_resource(
    client: ResourceClient,
    resource: ResourceDefinition,
    output: Path,
    *,
    query: str = "",
    limit: int | None = None,
    fmt: str = "json",
) -> int:
    records = await collect_records(client, resource, query=query, limit=limit)
    write_records(records, output, fmt=fmt)
    logger.info("Exported {} {} records to {}", len(records), resource.name, output)
    return len(records)
