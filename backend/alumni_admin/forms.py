"""Validated edit forms for each resource type."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    HttpUrl,
    StringConstraints,
    TypeAdapter,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from .domain import ListField

RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

MEMBERSHIP_STATUSES = ("LifeTime Member", "Annual Member", "Inactive")

_REQUIRED_ERROR_TYPES = {"missing", "string_too_short", "too_short"}
_HTTP_URL = TypeAdapter(HttpUrl)


class ValidationError(Exception):
    """Raised when form values fail their field constraints.

    ``errors`` maps each failing field to a single message. Nothing is sent
    to the gateway while a form is invalid.
    """

    def __init__(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid form values: {fields}")


class FormModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    list_fields: ClassVar[tuple[str, ...]] = ()

    @field_validator("*", mode="before")
    @classmethod
    def _prune_entries(cls, value: Any) -> Any:
        if isinstance(value, ListField):
            return value.pruned()
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return [item.strip() for item in value if item.strip()]
        return value


def _validate_http_url(value: str) -> str:
    try:
        _HTTP_URL.validate_python(value)
    except PydanticValidationError as exc:
        raise ValueError(f"Invalid URL: {value}") from exc
    return value


class AlumnusForm(FormModel):
    name: RequiredStr = Field(title="Name")
    email: EmailStr = Field(title="Email")
    mobile: RequiredStr = Field(title="Mobile number")
    address: RequiredStr = Field(title="Address")
    city: RequiredStr = Field(title="City")
    state: RequiredStr = Field(title="State")


class MembershipStatusForm(FormModel):
    membership_status: Literal["LifeTime Member", "Annual Member", "Inactive"] = Field(
        title="Membership status"
    )


class BusinessForm(FormModel):
    name: RequiredStr = Field(title="Business name")
    owner: RequiredStr = Field(title="Owner name")
    category: RequiredStr = Field(title="Category")
    location: RequiredStr = Field(title="Location")
    phone: RequiredStr = Field(title="Phone number")
    email: EmailStr = Field(title="Email")
    website: RequiredStr = Field(title="Website")
    description: RequiredStr = Field(title="Description")

    @field_validator("website")
    @classmethod
    def _check_website(cls, value: str) -> str:
        return _validate_http_url(value)


class EducatorForm(FormModel):
    list_fields: ClassVar[tuple[str, ...]] = (
        "areasOfExpertise",
        "achievements",
        "documents",
    )

    name: RequiredStr = Field(title="Name")
    department: RequiredStr = Field(title="Department")
    specialization: RequiredStr = Field(title="Specialization")
    email: EmailStr = Field(title="Email")
    phone: RequiredStr = Field(title="Phone number")
    experience: RequiredStr = Field(title="Experience")
    areas_of_expertise: list[str] = Field(
        alias="areasOfExpertise", min_length=1, title="Areas of expertise"
    )
    achievements: list[str] = Field(min_length=1, title="Achievements")
    documents: list[str] = Field(default_factory=list, title="Documents")

    @field_validator("documents")
    @classmethod
    def _check_documents(cls, value: list[str]) -> list[str]:
        return [_validate_http_url(item) for item in value]


class TicketPricingForm(FormModel):
    adult: float = Field(0, ge=0, title="Adult price")
    senior_citizen: float = Field(0, ge=0, alias="seniorCitizen", title="Senior citizen price")
    children: float = Field(0, ge=0, title="Children price")


class EventForm(FormModel):
    title: RequiredStr = Field(title="Title")
    description: RequiredStr = Field(title="Description")
    date: RequiredStr = Field(title="Date")
    time: RequiredStr = Field(title="Time")
    venue: RequiredStr = Field(title="Venue")
    category: RequiredStr = Field(title="Category")
    capacity: int = Field(ge=0, title="Capacity")
    pricing: TicketPricingForm = Field(default_factory=TicketPricingForm, title="Pricing")
    total_targeted_amount: float = Field(
        0, ge=0, alias="totalTargetedAmount", title="Total targeted amount"
    )


class ArticleForm(FormModel):
    title: RequiredStr = Field(title="Title")
    content: RequiredStr = Field(title="Content")
    category: RequiredStr = Field(title="Category")
    featured: bool = Field(False, title="Featured")


class OpportunityForm(FormModel):
    title: RequiredStr = Field(title="Title")
    kind: RequiredStr = Field(alias="type", title="Type")
    company: RequiredStr = Field(title="Company")
    location: RequiredStr = Field(title="Location")
    description: str | None = Field(default=None, title="Description")
    posted_by: str | None = Field(default=None, alias="postedBy", title="Posted by")


def field_keys(form: type[FormModel]) -> list[str]:
    """Return the wire names of the form's fields, in declaration order."""

    return [info.alias or name for name, info in form.model_fields.items()]


def _field_label(form: type[FormModel], key: str) -> str:
    for name, info in form.model_fields.items():
        if key in (name, info.alias):
            return info.title or name
    return key


def initial_values(form: type[FormModel], entity: Mapping[str, Any] | None) -> dict[str, Any]:
    """Seed form values from an entity, or blanks when creating."""

    entity = entity or {}
    values: dict[str, Any] = {}
    for name, info in form.model_fields.items():
        key = info.alias or name
        raw = entity.get(key, entity.get(name))
        if key in form.list_fields:
            if isinstance(raw, str):
                raw = raw.splitlines()
            values[key] = ListField(raw or [])
        elif raw is None:
            if info.is_required():
                values[key] = ""
        else:
            values[key] = raw
    return values


def validate_form(form: type[FormModel], values: Mapping[str, Any]) -> dict[str, Any]:
    """Validate ``values`` against ``form`` and return the request payload."""

    try:
        model = form.model_validate(dict(values))
    except PydanticValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            loc = [str(part) for part in error["loc"]]
            key = ".".join(loc) if loc else "__root__"
            if key in errors:
                continue
            if error["type"] in _REQUIRED_ERROR_TYPES and loc:
                errors[key] = f"{_field_label(form, loc[0])} is required"
            else:
                errors[key] = error["msg"]
        raise ValidationError(errors) from exc
    return model.model_dump(by_alias=True, mode="json", exclude_none=True)


__all__ = [
    "AlumnusForm",
    "ArticleForm",
    "BusinessForm",
    "EducatorForm",
    "EventForm",
    "FormModel",
    "MEMBERSHIP_STATUSES",
    "MembershipStatusForm",
    "OpportunityForm",
    "ValidationError",
    "field_keys",
    "initial_values",
    "validate_form",
]
