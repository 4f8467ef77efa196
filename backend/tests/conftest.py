from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import httpx
import pytest
import pytest_asyncio

from alumni_admin.core.config import Settings
from alumni_admin.core.credentials import StaticTokenProvider
from gateway.client import ResourceClient

from fakes import FakeGateway

GATEWAY_URL = "https://gateway.test"


@pytest.fixture
def test_settings(monkeypatch) -> Settings:
    settings = Settings(
        gateway_base_url=GATEWAY_URL,
        page_size=20,
        search_debounce_seconds=0.05,
        request_timeout_seconds=5.0,
        api_token="test-token",
        token_storage_paths=[],
        resource_overrides={},
    )
    monkeypatch.setattr("alumni_admin.core.config.get_settings", lambda: settings)
    monkeypatch.setattr("alumni_admin.core.config.settings", settings)
    return settings


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest_asyncio.fixture
async def client(gateway: FakeGateway, test_settings: Settings):
    resource_client = ResourceClient(
        settings=test_settings,
        credentials=StaticTokenProvider("test-token"),
        transport=httpx.MockTransport(gateway),
    )
    yield resource_client
    await resource_client.aclose()
