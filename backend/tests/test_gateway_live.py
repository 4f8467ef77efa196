from __future__ import annotations

import pytest

from alumni_admin.core.config import Settings
from alumni_admin.resources import get_resource
from gateway.client import ResourceClient
from gateway.errors import TransportError


@pytest.mark.network
@pytest.mark.asyncio
async def test_gateway_live_lists_events():
    settings = Settings()
    records: list[dict[str, object]] = []
    try:
        async with ResourceClient(settings=settings, page_size=5) as client:
            async for record in client.iter_records(get_resource("events")):
                records.append(record)
                if len(records) >= 5:
                    break
    except TransportError as exc:
        pytest.skip(f"Alumni gateway unavailable: {exc}")

    for record in records:
        assert isinstance(record, dict)
        assert record.get("id"), "event payload missing identifier"
