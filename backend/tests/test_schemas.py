from __future__ import annotations

import pytest
from pydantic import ValidationError

from alumni_admin.schemas import (
    Alumnus,
    AlumnusProfile,
    Educator,
    EventDetails,
    Opportunity,
    PageEnvelope,
)


def test_page_envelope_rejects_more_items_than_limit():
    """Verify a page can never hold more rows than its limit."""
    with pytest.raises(ValidationError):
        PageEnvelope.model_validate(
            {"items": [{"id": "1"}, {"id": "2"}], "pagination": {"page": 1, "limit": 1}}
        )


def test_page_envelope_accepts_camel_case_has_more():
    envelope = PageEnvelope.model_validate(
        {"items": [], "pagination": {"page": 3, "limit": 20, "hasMore": True, "total": 80}}
    )
    assert envelope.pagination.has_more is True
    assert envelope.pagination.total == 80
    assert envelope.model_dump(by_alias=True)["pagination"]["hasMore"] is True


def test_record_identifier_is_coerced_to_string():
    alumnus = Alumnus.model_validate({"id": 42, "name": "Asha Rao", "batch": "2004"})
    assert alumnus.id == "42"
    assert alumnus.initials == "AR"


def test_unknown_fields_are_preserved():
    alumnus = Alumnus.model_validate({"id": "1", "name": "Asha", "nickname": "A"})
    assert alumnus.model_dump()["nickname"] == "A"


def test_profile_lists_accept_multiline_strings():
    profile = AlumnusProfile.model_validate(
        {"id": "1", "name": "Asha", "education": "B.Sc\n\nM.Sc", "areasOfExpertise": None}
    )
    assert profile.education == ["B.Sc", "M.Sc"]
    assert profile.areas_of_expertise == []


def test_educator_document_links_default_to_empty():
    educator = Educator.model_validate({"id": "e1", "name": "Dr. Mehta"})
    assert educator.documents == []
    assert educator.areas_of_expertise == []


def test_opportunity_type_alias():
    opportunity = Opportunity.model_validate(
        {"id": 3, "title": "Mentor", "type": "Mentorship", "postedBy": "Asha"}
    )
    assert opportunity.kind == "Mentorship"
    assert opportunity.posted_by == "Asha"


def _event(**overrides):
    payload = {
        "id": "ev1",
        "title": "Reunion",
        "totalTargetedAmount": 1000,
        "pricing": {"adult": 100, "seniorCitizen": 50, "children": 20},
        "registrationBreakdown": {"adult": 2, "seniorCitizen": 2, "children": 5},
        "registrationsByType": {
            "sponsor": [{"name": "Acme", "amountSponsored": 250}],
            "serviceProvider": [{"name": "Caterer", "contractValue": 150}],
        },
    }
    payload.update(overrides)
    return EventDetails.model_validate(payload)


def test_event_raised_amount_sums_tickets_sponsors_and_providers():
    event = _event()
    # 2*100 + 2*50 + 5*20 + 250 + 150
    assert event.raised_amount == 800
    assert event.progress == pytest.approx(80.0)


def test_event_progress_is_capped_at_one_hundred():
    event = _event(totalTargetedAmount=400)
    assert event.progress == 100.0


def test_event_progress_is_zero_without_target():
    event = _event(totalTargetedAmount=0)
    assert event.progress == 0.0
