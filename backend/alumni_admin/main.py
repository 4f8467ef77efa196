from __future__ import annotations

from typing import Annotated, AsyncIterator

import httpx
from fastapi import Depends, FastAPI, Header, HTTPException, Query
from fastapi.responses import JSONResponse
from loguru import logger

from gateway.client import ResourceClient
from gateway.errors import GatewayError, NotFoundOnDetailFetch

from . import schemas
from .core.config import settings
from .core.credentials import StaticTokenProvider
from .resources import ResourceDefinition, UnknownResourceError, resolve_resource

app = FastAPI(title="Alumni Admin API", version="0.1.0", debug=settings.debug)


@app.get("/healthz", tags=["system"])
def healthcheck() -> dict[str, str]:
    """Basic readiness probe consumed by infrastructure monitors."""

    return {"status": "ok"}


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _gateway_transport() -> httpx.AsyncBaseTransport | None:
    """Transport used for gateway calls; ``None`` selects the network."""

    return None


async def _gateway_client(
    authorization: Annotated[str | None, Header()] = None,
    transport: httpx.AsyncBaseTransport | None = Depends(_gateway_transport),
) -> AsyncIterator[ResourceClient]:
    """Provide a gateway client that forwards the caller's bearer token."""

    client = ResourceClient(
        settings=settings,
        credentials=StaticTokenProvider(_bearer_token(authorization)),
        transport=transport,
    )
    try:
        yield client
    finally:
        await client.aclose()


def _resource(resource_name: str) -> ResourceDefinition:
    try:
        return resolve_resource(resource_name, settings)
    except UnknownResourceError as exc:
        raise HTTPException(status_code=404, detail="Resource not found") from exc


@app.get("/api/{resource_name}", response_model=schemas.PageEnvelope, tags=["resources"])
async def list_resource(
    *,
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    limit: Annotated[int | None, Query(ge=1, le=100, description="Page size")] = None,
    name: Annotated[str | None, Query(description="Name filter (alumni directory)")] = None,
    search: Annotated[str | None, Query(description="Free-text filter")] = None,
    resource: ResourceDefinition = Depends(_resource),
    client: ResourceClient = Depends(_gateway_client),
):
    """Proxy one page of a resource listing from the gateway."""

    query = name or search or ""
    try:
        return await client.list_page(resource, page=page, query=query, limit=limit)
    except GatewayError as exc:
        logger.error("Error fetching {} data: {}", resource.name, exc)
        return JSONResponse(
            {"error": f"Failed to fetch {resource.name} data"}, status_code=500
        )


@app.get("/api/{resource_name}/{entity_id}", tags=["resources"])
async def get_resource(
    entity_id: str,
    resource: ResourceDefinition = Depends(_resource),
    client: ResourceClient = Depends(_gateway_client),
):
    """Proxy the full detail record of one entity."""

    try:
        return await client.get(resource, entity_id)
    except NotFoundOnDetailFetch:
        return JSONResponse({"error": f"{resource.label} not found"}, status_code=404)
    except GatewayError as exc:
        logger.error("Error fetching {} details: {}", resource.name, exc)
        return JSONResponse(
            {"error": f"Failed to fetch {resource.name} details"}, status_code=500
        )
