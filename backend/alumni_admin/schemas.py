from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Pagination(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(gt=0)
    has_more: bool = Field(False, alias="hasMore")
    total: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(populate_by_name=True)


class PageEnvelope(BaseModel):
    """One page of records as returned by a gateway list endpoint."""

    items: list[dict[str, Any]] = Field(default_factory=list)
    pagination: Pagination

    @model_validator(mode="after")
    def _check_page_size(self) -> "PageEnvelope":
        if len(self.items) > self.pagination.limit:
            raise ValueError(
                f"page holds {len(self.items)} items but limit is {self.pagination.limit}"
            )
        return self


class Record(BaseModel):
    """Base for gateway records; unknown fields are kept as-is."""

    id: str

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        if value is None:
            raise ValueError("record identifier is required")
        return str(value)


def _string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [line.strip() for line in value.splitlines() if line.strip()]
    return [str(item) for item in value]


class Alumnus(Record):
    name: str
    batch: str | None = None
    email: str | None = None
    mobile: str | None = None
    city: str | None = None
    state: str | None = None
    membership_status: str | None = None
    is_active: bool = Field(False, alias="isActive")

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.name.split() if part).upper()


class AlumnusProfile(Alumnus):
    address: str | None = None
    bio: str | None = None
    membership_no: str | None = None
    education: list[str] = Field(default_factory=list)
    experience: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    areas_of_expertise: list[str] = Field(default_factory=list, alias="areasOfExpertise")
    linkedin: str | None = None
    twitter: str | None = None
    website: str | None = None

    @field_validator(
        "education", "experience", "achievements", "areas_of_expertise", mode="before"
    )
    @classmethod
    def _coerce_entries(cls, value: Any) -> list[str]:
        return _string_list(value)


class Business(Record):
    name: str
    owner: str | None = None
    category: str | None = None
    location: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    description: str | None = None
    status: str | None = None


class Educator(Record):
    name: str
    department: str | None = None
    specialization: str | None = None
    email: str | None = None
    phone: str | None = None
    experience: str | None = None
    areas_of_expertise: list[str] = Field(default_factory=list, alias="areasOfExpertise")
    achievements: list[str] = Field(default_factory=list)
    documents: list[str] = Field(default_factory=list)
    status: str | None = None

    @field_validator("areas_of_expertise", "achievements", "documents", mode="before")
    @classmethod
    def _coerce_entries(cls, value: Any) -> list[str]:
        return _string_list(value)


class Event(Record):
    title: str
    description: str | None = None
    date: str | None = None
    time: str | None = None
    venue: str | None = None
    category: str | None = None
    capacity: int | None = None
    status: str | None = None


class TicketPricing(BaseModel):
    adult: float = 0.0
    senior_citizen: float = Field(0.0, alias="seniorCitizen")
    children: float = 0.0

    model_config = ConfigDict(populate_by_name=True)


class RegistrationBreakdown(BaseModel):
    adult: int = 0
    senior_citizen: int = Field(0, alias="seniorCitizen")
    children: int = 0

    model_config = ConfigDict(populate_by_name=True)


class Registration(BaseModel):
    user_id: str | None = Field(default=None, alias="userId")
    registration_type: str | None = Field(default=None, alias="registrationType")
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    registered_at: str | None = Field(default=None, alias="registeredAt")
    adults: int | None = None
    children: int | None = None
    children_under5: int | None = Field(default=None, alias="childrenUnder5")
    seniors: int | None = None
    dietary_restrictions: str | None = Field(default=None, alias="dietaryRestrictions")
    amount: float | None = None
    sponsorship_level: str | None = Field(default=None, alias="sponsorshipLevel")
    amount_sponsored: float | None = Field(default=None, alias="amountSponsored")
    service_type: str | None = Field(default=None, alias="serviceType")
    contract_value: float | None = Field(default=None, alias="contractValue")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class RegistrationsByType(BaseModel):
    participant: list[Registration] = Field(default_factory=list)
    sponsor: list[Registration] = Field(default_factory=list)
    service_provider: list[Registration] = Field(default_factory=list, alias="serviceProvider")

    model_config = ConfigDict(populate_by_name=True)


class EventDetails(Event):
    registrations_count: int = Field(0, alias="registrationsCount")
    remaining_capacity: int | None = Field(default=None, alias="remainingCapacity")
    total_targeted_amount: float = Field(0.0, alias="totalTargetedAmount")
    pricing: TicketPricing = Field(default_factory=TicketPricing)
    registration_breakdown: RegistrationBreakdown = Field(
        default_factory=RegistrationBreakdown, alias="registrationBreakdown"
    )
    registrations_by_type: RegistrationsByType = Field(
        default_factory=RegistrationsByType, alias="registrationsByType"
    )

    @property
    def raised_amount(self) -> float:
        breakdown = self.registration_breakdown
        pricing = self.pricing
        participants = (
            breakdown.adult * pricing.adult
            + breakdown.senior_citizen * pricing.senior_citizen
            + breakdown.children * pricing.children
        )
        sponsors = sum(item.amount_sponsored or 0 for item in self.registrations_by_type.sponsor)
        providers = sum(
            item.contract_value or 0 for item in self.registrations_by_type.service_provider
        )
        return participants + sponsors + providers

    @property
    def progress(self) -> float:
        """Percentage of the fundraising target reached, capped at 100."""

        if not self.total_targeted_amount:
            return 0.0
        return min(self.raised_amount / self.total_targeted_amount * 100, 100.0)


class Article(Record):
    title: str
    content: str | None = None
    excerpt: str | None = None
    author: str | None = None
    date: str | None = None
    category: str | None = None
    status: str | None = None
    featured: bool = False


class Opportunity(Record):
    title: str
    kind: str | None = Field(default=None, alias="type")
    company: str | None = None
    location: str | None = None
    industry: str | None = None
    mentor: str | None = None
    duration: str | None = None
    posted_by: str | None = Field(default=None, alias="postedBy")
    posted_date: str | None = Field(default=None, alias="postedDate")
    description: str | None = None
    status: str | None = None
