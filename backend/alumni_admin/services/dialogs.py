"""Create/edit, view and change-status dialogs for dashboard resources."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from alumni_admin.domain import DialogMode, DialogState, ListField
from alumni_admin.forms import ValidationError, initial_values, validate_form
from alumni_admin.resources import ResourceDefinition
from alumni_admin.schemas import Record
from gateway.client import ResourceClient
from gateway.errors import GatewayError, NotFoundOnDetailFetch

from .notifications import Notifier

SuccessCallback = Callable[[], Awaitable[Any]]


class ResourceEditDialog:
    """Modal form that creates or updates one record.

    Opening without an entity starts create mode with blank values. Opening
    with an entity starts edit mode; resources flagged ``detail_on_edit``
    first fetch the full record because list rows only carry a summary.
    """

    def __init__(
        self,
        resource: ResourceDefinition,
        client: ResourceClient,
        *,
        notifier: Notifier | None = None,
        on_success: SuccessCallback | None = None,
    ) -> None:
        self.resource = resource
        self.client = client
        self.notifier = notifier or Notifier()
        self.on_success = on_success
        self.state: DialogState | None = None
        self.values: dict[str, Any] = {}
        self.errors: dict[str, str] = {}
        self.load_failed = False
        self.saving = False

    @property
    def is_open(self) -> bool:
        return self.state is not None

    @property
    def can_submit(self) -> bool:
        return self.is_open and not self.load_failed and not self.saving

    async def open(self, entity: Mapping[str, Any] | None = None) -> None:
        self.errors = {}
        self.load_failed = False
        if entity is None:
            self.state = DialogState(DialogMode.CREATE)
            self.values = initial_values(self.resource.form, None)
            return

        record = dict(entity)
        entity_id = str(record["id"])
        if self.resource.detail_on_edit:
            try:
                record = await self.client.get(self.resource, entity_id)
            except NotFoundOnDetailFetch as exc:
                logger.error("{}", exc)
                self._fail_load(entity_id)
                return
            except GatewayError as exc:
                logger.error("Loading {} {} failed: {}", self.resource.name, entity_id, exc)
                self._fail_load(entity_id)
                return
            record["id"] = entity_id

        self.state = DialogState(DialogMode.EDIT, record)
        self.values = initial_values(self.resource.form, record)

    def _fail_load(self, entity_id: str) -> None:
        self.state = DialogState(DialogMode.EDIT, {"id": entity_id})
        self.values = {}
        self.load_failed = True
        self.notifier.error(f"Failed to load {self.resource.label.lower()}")

    def set_value(self, key: str, value: Any) -> None:
        self.values[key] = value
        self.errors.pop(key, None)

    def _list_field(self, key: str) -> ListField:
        value = self.values.get(key)
        if not isinstance(value, ListField):
            value = ListField(value or [])
            self.values[key] = value
        return value

    def append_entry(self, key: str, value: str = "") -> int:
        return self._list_field(key).append(value)

    def remove_entry(self, key: str, index: int) -> str:
        return self._list_field(key).remove_at(index)

    def set_entry(self, key: str, index: int, value: str) -> None:
        self._list_field(key).set(index, value)
        self.errors.pop(key, None)

    def validate(self) -> dict[str, Any]:
        try:
            payload = validate_form(self.resource.form, self.values)
        except ValidationError as exc:
            self.errors = exc.errors
            raise
        self.errors = {}
        return payload

    async def submit(self) -> bool:
        """Validate and send the form; ``True`` once the gateway accepted it."""

        if self.state is None:
            raise RuntimeError("Dialog is not open")
        if not self.can_submit:
            return False
        try:
            payload = self.validate()
        except ValidationError:
            return False

        editing = self.state.mode is DialogMode.EDIT
        action = "update" if editing else "create"
        self.saving = True
        try:
            if editing:
                await self.client.update(self.resource, self.state.entity_id, payload)
            else:
                await self.client.create(self.resource, payload)
        except GatewayError as exc:
            logger.error("Failed to {} {}: {}", action, self.resource.name, exc)
            self.notifier.error(f"Failed to {action} {self.resource.label.lower()}")
            return False
        finally:
            self.saving = False

        self.notifier.success(f"{self.resource.label} {action}d successfully")
        self.close()
        if self.on_success is not None:
            await self.on_success()
        return True

    def close(self) -> None:
        self.state = None
        self.values = {}
        self.errors = {}
        self.load_failed = False


class ChangeStatusDialog:
    """Single-select dialog updating a record's status field."""

    def __init__(
        self,
        resource: ResourceDefinition,
        client: ResourceClient,
        *,
        notifier: Notifier | None = None,
        on_success: SuccessCallback | None = None,
    ) -> None:
        if not resource.status_field or resource.status_form is None:
            raise ValueError(f"Resource '{resource.name}' has no status field")
        self.resource = resource
        self.client = client
        self.notifier = notifier or Notifier()
        self.on_success = on_success
        self.entity_id: str | None = None
        self.status = ""
        self.errors: dict[str, str] = {}
        self.saving = False

    def open(self, entity_id: str, current_status: str = "") -> None:
        self.entity_id = str(entity_id)
        self.status = current_status
        self.errors = {}

    async def submit(self) -> bool:
        if self.entity_id is None:
            raise RuntimeError("Dialog is not open")
        if self.saving:
            return False
        field = self.resource.status_field
        try:
            payload = validate_form(self.resource.status_form, {field: self.status})
        except ValidationError as exc:
            self.errors = exc.errors
            return False

        self.saving = True
        try:
            await self.client.update(self.resource, self.entity_id, payload)
        except GatewayError as exc:
            logger.error("Failed to update {} status: {}", self.resource.name, exc)
            self.notifier.error("Failed to update status")
            return False
        finally:
            self.saving = False

        self.notifier.success("Status updated successfully")
        self.entity_id = None
        if self.on_success is not None:
            await self.on_success()
        return True


class ViewDialog:
    """Read-only detail view of one record."""

    def __init__(
        self,
        resource: ResourceDefinition,
        client: ResourceClient,
        *,
        notifier: Notifier | None = None,
    ) -> None:
        self.resource = resource
        self.client = client
        self.notifier = notifier or Notifier()
        self.record: Record | None = None

    async def open(self, entity_id: str) -> Record | None:
        self.record = None
        try:
            data = await self.client.get(self.resource, entity_id)
            data["id"] = entity_id
            self.record = self.resource.record_model.model_validate(data)
        except GatewayError as exc:
            logger.error("Loading {} {} failed: {}", self.resource.name, entity_id, exc)
            self.notifier.error(f"Failed to load {self.resource.label.lower()}")
        except PydanticValidationError as exc:
            logger.error("Unexpected {} record shape: {}", self.resource.name, exc)
            self.notifier.error(f"Failed to load {self.resource.label.lower()}")
        return self.record
