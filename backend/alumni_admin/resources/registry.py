"""Runtime registry of the dashboard's resource types."""

from __future__ import annotations

from typing import Dict

from alumni_admin import forms, schemas
from alumni_admin.core.config import Settings

from .base import ResourceDefinition


class UnknownResourceError(LookupError):
    """Raised when a page or command asks for an unregistered resource."""


_RESOURCES: Dict[str, ResourceDefinition] = {}


def register_resource(definition: ResourceDefinition) -> None:
    """Register or replace a resource definition."""

    _RESOURCES[definition.name.lower()] = definition


def get_resource(name: str) -> ResourceDefinition:
    """Return the definition registered under ``name``."""

    try:
        return _RESOURCES[name.lower()]
    except KeyError as exc:
        raise UnknownResourceError(f"Resource '{name}' is not registered") from exc


def resolve_resource(name: str, settings: Settings) -> ResourceDefinition:
    """Return the registered definition with configured overrides applied."""

    return get_resource(name).with_overrides(settings.resource_config(name.lower()))


def available_resources() -> tuple[str, ...]:
    """Return the tuple of registered resource names."""

    return tuple(sorted(_RESOURCES))


# Built-in resources of the alumni dashboard.
register_resource(
    ResourceDefinition(
        name="alumni",
        label="Alumni details",
        list_path="/directory",
        filter_param="name",
        items_key="users",
        detail_path="/profile/{id}",
        detail_key="profile",
        detail_on_edit=True,
        update_path="/users/profile",
        update_id_in_body=True,
        form=forms.AlumnusForm,
        record_model=schemas.AlumnusProfile,
        status_field="membership_status",
        status_form=forms.MembershipStatusForm,
    )
)
register_resource(
    ResourceDefinition(
        name="businesses",
        label="Business",
        list_path="/businesses",
        form=forms.BusinessForm,
        record_model=schemas.Business,
    )
)
register_resource(
    ResourceDefinition(
        name="educators",
        label="Educator",
        list_path="/educators",
        detail_on_edit=True,
        form=forms.EducatorForm,
        record_model=schemas.Educator,
    )
)
register_resource(
    ResourceDefinition(
        name="events",
        label="Event",
        list_path="/events",
        detail_on_edit=True,
        form=forms.EventForm,
        record_model=schemas.EventDetails,
    )
)
register_resource(
    ResourceDefinition(
        name="news",
        label="Article",
        list_path="/news",
        form=forms.ArticleForm,
        record_model=schemas.Article,
    )
)
register_resource(
    ResourceDefinition(
        name="networking",
        label="Opportunity",
        list_path="/opportunities",
        form=forms.OpportunityForm,
        record_model=schemas.Opportunity,
    )
)


__all__ = [
    "UnknownResourceError",
    "available_resources",
    "get_resource",
    "register_resource",
    "resolve_resource",
]
