"""Paged, searchable listing of one resource type."""

from __future__ import annotations

import asyncio
from typing import Any

from loguru import logger

from alumni_admin.domain import LoadState
from alumni_admin.resources import ResourceDefinition
from alumni_admin.schemas import Pagination
from gateway.client import ResourceClient
from gateway.errors import GatewayError

from .debounce import Debouncer
from .dialogs import ChangeStatusDialog, ResourceEditDialog, ViewDialog
from .notifications import Notifier


class ResourceListView:
    """Holds the rows, pagination and search state of one dashboard page.

    Every load takes a sequence number; a result is applied only if no newer
    load was started meanwhile, so a slow response for an old query or a
    refetch racing a page load can never overwrite newer state.
    """

    def __init__(
        self,
        resource: ResourceDefinition,
        client: ResourceClient,
        *,
        notifier: Notifier | None = None,
        debounce_seconds: float = 0.3,
        page_size: int | None = None,
    ) -> None:
        self.resource = resource
        self.client = client
        self.notifier = notifier or Notifier()
        self.page_size = page_size or client.page_size
        self.items: list[dict[str, Any]] = []
        self.pagination = Pagination(page=1, limit=self.page_size, has_more=False, total=0)
        self.query = ""
        self.state = LoadState.IDLE
        self.last_error: str | None = None
        self._sequence = 0
        self._debouncer = Debouncer(debounce_seconds)

    @property
    def loading(self) -> bool:
        return self.state is LoadState.LOADING

    async def mount(self) -> bool:
        return await self.load(1, self.query)

    async def load(self, page: int = 1, query: str | None = None) -> bool:
        """Fetch one page; page 1 replaces the rows, later pages append.

        Returns ``True`` when the result was applied. Failures are reported
        through the notifier and leave the current rows untouched.
        """

        query = self.query if query is None else query
        self._sequence += 1
        ticket = self._sequence
        self.state = LoadState.LOADING
        try:
            envelope = await self.client.list_page(
                self.resource, page=page, query=query, limit=self.page_size
            )
        except GatewayError as exc:
            if ticket != self._sequence:
                logger.debug("Ignoring failure of superseded {} load", self.resource.name)
                return False
            self.state = LoadState.ERROR
            self.last_error = str(exc)
            logger.error("Error fetching {}: {}", self.resource.name, exc)
            self.notifier.error(f"Failed to fetch {self.resource.name} data")
            return False

        if ticket != self._sequence:
            logger.debug(
                "Discarding stale {} page {} for query {!r}", self.resource.name, page, query
            )
            return False

        if page == 1:
            self.items = list(envelope.items)
        else:
            self.items.extend(envelope.items)
        self.pagination = envelope.pagination
        self.state = LoadState.IDLE
        self.last_error = None
        return True

    def search(self, query: str) -> asyncio.Task:
        """Record the query and fetch page 1 once typing pauses."""

        self.query = query

        async def _fire() -> None:
            await self.load(1, query)

        return self._debouncer.schedule(_fire)

    async def load_more(self) -> bool:
        if not self.pagination.has_more:
            return False
        return await self.load(self.pagination.page + 1, self.query)

    async def refresh(self) -> bool:
        self._debouncer.cancel()
        return await self.load(1, self.query)

    async def settle(self) -> None:
        """Wait for the pending debounced search, if any, to finish."""

        await self._debouncer.wait()

    def find(self, entity_id: str) -> dict[str, Any] | None:
        return next(
            (item for item in self.items if str(item.get("id")) == str(entity_id)), None
        )

    def edit_dialog(self) -> ResourceEditDialog:
        return ResourceEditDialog(
            self.resource, self.client, notifier=self.notifier, on_success=self.refresh
        )

    async def open_create(self) -> ResourceEditDialog:
        dialog = self.edit_dialog()
        await dialog.open()
        return dialog

    async def open_edit(self, entity_id: str) -> ResourceEditDialog:
        dialog = self.edit_dialog()
        await dialog.open(self.find(entity_id) or {"id": entity_id})
        return dialog

    async def open_view(self, entity_id: str) -> ViewDialog:
        dialog = ViewDialog(self.resource, self.client, notifier=self.notifier)
        await dialog.open(entity_id)
        return dialog

    def open_status(self, entity_id: str) -> ChangeStatusDialog:
        dialog = ChangeStatusDialog(
            self.resource, self.client, notifier=self.notifier, on_success=self.refresh
        )
        row = self.find(entity_id) or {}
        dialog.open(entity_id, str(row.get(self.resource.status_field) or ""))
        return dialog

    async def delete(self, entity_id: str) -> bool:
        label = self.resource.label
        try:
            await self.client.delete(self.resource, entity_id)
        except GatewayError as exc:
            logger.error("Failed to delete {} {}: {}", self.resource.name, entity_id, exc)
            self.notifier.error(f"Failed to delete {label.lower()}")
            return False
        self.notifier.success(f"{label} deleted successfully")
        await self.refresh()
        return True
