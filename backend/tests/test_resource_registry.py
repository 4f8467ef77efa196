import pytest

from alumni_admin.core.config import Settings
from alumni_admin.resources import (
    UnknownResourceError,
    available_resources,
    get_resource,
    resolve_resource,
)


def test_builtin_resources_are_registered():
    assert available_resources() == (
        "alumni",
        "businesses",
        "educators",
        "events",
        "networking",
        "news",
    )


def test_lookup_is_case_insensitive():
    assert get_resource("Alumni").list_path == "/directory"


def test_unknown_resource_raises():
    with pytest.raises(UnknownResourceError):
        get_resource("payments")


def test_alumni_routes():
    alumni = get_resource("alumni")
    assert alumni.detail_url("u 1") == "/profile/u%201"
    assert alumni.update_url("u1") == "/users/profile"
    assert alumni.delete_url("u1") == "/directory/u1"


def test_default_routes_derive_from_list_path():
    networking = get_resource("networking")
    assert networking.detail_url("o1") == "/opportunities/o1"
    assert networking.update_url("o1") == "/opportunities/o1"
    assert networking.delete_url("o1") == "/opportunities/o1"


def test_resolve_applies_configured_overrides():
    settings = Settings(
        resource_overrides={"news": {"list_path": "/articles", "label": "ignored"}}
    )
    news = resolve_resource("news", settings)
    assert news.list_path == "/articles"
    assert news.label == "Article"
    assert news.detail_url("n1") == "/articles/n1"
    assert get_resource("news").list_path == "/news"
