from __future__ import annotations

import asyncio
from typing import Iterable

from alumni_admin.core.config import Settings, get_settings
from alumni_admin.core.credentials import CredentialProvider
from alumni_admin.resources import (
    UnknownResourceError,
    available_resources,
    resolve_resource,
)
from gateway.client import ResourceClient

from .list_view import ResourceListView
from .notifications import Notifier


class Dashboard:
    """One list view per resource page, sharing a gateway client and notifier."""

    def __init__(
        self,
        client: ResourceClient,
        *,
        settings: Settings | None = None,
        notifier: Notifier | None = None,
        resources: Iterable[str] | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.client = client
        self.notifier = notifier or Notifier()
        names = [
            name.lower()
            for name in (resources if resources is not None else available_resources())
        ]
        self.views: dict[str, ResourceListView] = {
            name: ResourceListView(
                resolve_resource(name, settings),
                client,
                notifier=self.notifier,
                debounce_seconds=settings.search_debounce_seconds,
                page_size=settings.page_size,
            )
            for name in names
        }

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        credentials: CredentialProvider | None = None,
    ) -> "Dashboard":
        settings = settings or get_settings()
        client = ResourceClient(settings=settings, credentials=credentials)
        return cls(client, settings=settings)

    def view(self, name: str) -> ResourceListView:
        try:
            return self.views[name.lower()]
        except KeyError as exc:
            raise UnknownResourceError(f"Resource '{name}' is not on this dashboard") from exc

    async def mount_all(self) -> dict[str, bool]:
        results = await asyncio.gather(*(view.mount() for view in self.views.values()))
        return dict(zip(self.views, results))

    async def aclose(self) -> None:
        await self.client.aclose()
