from __future__ import annotations

from typing import Any

from loguru import logger
from pydantic import ValidationError

from alumni_admin.resources import ResourceDefinition
from alumni_admin.schemas import PageEnvelope

from .errors import TransportError


def _as_records(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    records = [item for item in value if isinstance(item, dict)]
    skipped = len(value) - len(records)
    if skipped:
        logger.warning("Skipped {} non-object entries in gateway list payload", skipped)
    return records


def _extract_items(payload: Any, resource: ResourceDefinition) -> list[dict[str, Any]]:
    if isinstance(payload, list):
        return _as_records(payload)
    if not isinstance(payload, dict):
        return []
    candidates: tuple[Any, ...] = (
        payload.get(resource.items_key),
        payload.get("items"),
        payload.get("data"),
        payload.get("results"),
    )
    return _as_records(next((value for value in candidates if isinstance(value, list)), []))


def normalize_page(
    payload: Any,
    resource: ResourceDefinition,
    *,
    page: int,
    limit: int,
) -> PageEnvelope:
    """Coerce a raw list response into a :class:`PageEnvelope`.

    Missing pagination fields fall back to the requested page and limit;
    ``hasMore`` is inferred from a full page when the gateway omits it.
    """

    items = _extract_items(payload, resource)
    raw_pagination = payload.get("pagination") if isinstance(payload, dict) else None
    pagination: dict[str, Any] = {"page": page, "limit": limit}
    if isinstance(raw_pagination, dict):
        pagination.update(
            {key: value for key, value in raw_pagination.items() if value is not None}
        )
    infer_has_more = "hasMore" not in pagination and "has_more" not in pagination
    try:
        envelope = PageEnvelope.model_validate({"items": items, "pagination": pagination})
    except ValidationError as exc:
        logger.error("Malformed {} page from gateway: {}", resource.name, exc)
        raise TransportError(f"Malformed {resource.name} page returned by gateway") from exc
    if infer_has_more:
        envelope.pagination.has_more = len(envelope.items) >= envelope.pagination.limit
    return envelope


def extract_detail(payload: Any, resource: ResourceDefinition) -> dict[str, Any] | None:
    """Return the record carried by a detail response, if any."""

    if not isinstance(payload, dict):
        return None
    record = payload.get(resource.detail_key) if resource.detail_key else payload
    if isinstance(record, dict) and record:
        return record
    return None
