"""Declarative description of one gateway resource type."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping
from urllib.parse import quote

from loguru import logger

from alumni_admin.forms import FormModel
from alumni_admin.schemas import Record

_OVERRIDABLE = {
    "list_path",
    "filter_param",
    "items_key",
    "detail_path",
    "detail_key",
    "update_path",
    "delete_path",
}


@dataclass(frozen=True, slots=True)
class ResourceDefinition:
    """Everything the generic client and views need to know about a resource.

    Path templates use ``{id}`` for the record identifier. When
    ``update_id_in_body`` is set the update route is a fixed profile-style
    endpoint and the identifier travels in the JSON body instead.
    """

    name: str
    label: str
    list_path: str
    form: type[FormModel]
    record_model: type[Record]
    filter_param: str = "search"
    items_key: str = "items"
    detail_path: str | None = None
    detail_key: str | None = None
    detail_on_edit: bool = False
    update_path: str | None = None
    update_id_in_body: bool = False
    delete_path: str | None = None
    status_field: str | None = None
    status_form: type[FormModel] | None = None

    def detail_url(self, entity_id: str) -> str:
        return _fill(self.detail_path or f"{self.list_path}/{{id}}", entity_id)

    def update_url(self, entity_id: str) -> str:
        return _fill(self.update_path or f"{self.list_path}/{{id}}", entity_id)

    def delete_url(self, entity_id: str) -> str:
        return _fill(self.delete_path or f"{self.list_path}/{{id}}", entity_id)

    def with_overrides(self, overrides: Mapping[str, Any]) -> "ResourceDefinition":
        if not overrides:
            return self
        accepted = {key: value for key, value in overrides.items() if key in _OVERRIDABLE}
        dropped = sorted(set(overrides) - _OVERRIDABLE)
        if dropped:
            logger.warning(
                "Dropped unsupported overrides for resource {}: {}",
                self.name,
                ", ".join(dropped),
            )
        return replace(self, **accepted)


def _fill(template: str, entity_id: str) -> str:
    return template.replace("{id}", quote(str(entity_id), safe=""))


__all__ = ["ResourceDefinition"]
