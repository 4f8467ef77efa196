from __future__ import annotations

from typing import Any, AsyncIterator, Mapping

import httpx
from loguru import logger

from alumni_admin.core.config import Settings, get_settings
from alumni_admin.core.credentials import CredentialProvider, provider_from_settings
from alumni_admin.resources import ResourceDefinition
from alumni_admin.schemas import PageEnvelope

from .errors import NotFoundError, NotFoundOnDetailFetch, TransportError
from .normalize import extract_detail, normalize_page


def _error_message(response: httpx.Response) -> str:
    fallback = f"Gateway responded with status: {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return fallback


class ResourceClient:
    """Async CRUD client shared by every dashboard resource."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        credentials: CredentialProvider | None = None,
        page_size: int | None = None,
        timeout: float | None = None,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.base_url = (base_url or settings.gateway_url).rstrip("/")
        self.credentials = credentials or provider_from_settings(settings)
        self.page_size = page_size or settings.page_size
        self.timeout = timeout or settings.request_timeout_seconds
        self.client = httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=transport
        )

    def _headers(self, *, json_body: bool = False) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        token = self.credentials.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        logger.info("Gateway {} {} params={}", method, path, params)
        try:
            response = await self.client.request(
                method,
                path,
                params=params,
                json=payload,
                headers=self._headers(json_body=payload is not None),
            )
        except httpx.HTTPError as exc:
            logger.error("Gateway {} {} failed: {}", method, path, exc)
            raise TransportError(f"Gateway request failed: {exc}") from exc

        if response.is_error:
            message = _error_message(response)
            logger.error("Gateway {} {} returned {}: {}", method, path, response.status_code, message)
            error_cls = NotFoundError if response.status_code == 404 else TransportError
            raise error_cls(message, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    async def list_page(
        self,
        resource: ResourceDefinition,
        *,
        page: int = 1,
        query: str = "",
        limit: int | None = None,
    ) -> PageEnvelope:
        limit = limit or self.page_size
        params: dict[str, Any] = {
            "page": page,
            "limit": limit,
            resource.filter_param: query,
        }
        payload = await self._request("GET", resource.list_path, params=params)
        return normalize_page(payload, resource, page=page, limit=limit)

    async def get(self, resource: ResourceDefinition, entity_id: str) -> dict[str, Any]:
        try:
            payload = await self._request("GET", resource.detail_url(entity_id))
        except NotFoundError as exc:
            raise NotFoundOnDetailFetch(resource.name, entity_id) from exc
        record = extract_detail(payload, resource)
        if record is None:
            raise NotFoundOnDetailFetch(resource.name, entity_id)
        return record

    async def create(
        self, resource: ResourceDefinition, values: Mapping[str, Any]
    ) -> dict[str, Any] | None:
        body = {key: value for key, value in values.items() if key != "id"}
        return await self._request("POST", resource.list_path, payload=body)

    async def update(
        self,
        resource: ResourceDefinition,
        entity_id: str,
        values: Mapping[str, Any],
    ) -> dict[str, Any] | None:
        body = dict(values)
        if resource.update_id_in_body:
            body["id"] = entity_id
        else:
            body.pop("id", None)
        return await self._request("PUT", resource.update_url(entity_id), payload=body)

    async def delete(self, resource: ResourceDefinition, entity_id: str) -> None:
        await self._request("DELETE", resource.delete_url(entity_id))

    async def iter_records(
        self,
        resource: ResourceDefinition,
        *,
        query: str = "",
    ) -> AsyncIterator[dict[str, Any]]:
        page = 1
        while True:
            envelope = await self.list_page(resource, page=page, query=query)
            for item in envelope.items:
                yield item
            if not envelope.pagination.has_more or not envelope.items:
                break
            page = envelope.pagination.page + 1

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "ResourceClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
