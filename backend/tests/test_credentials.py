import json

from alumni_admin.core.config import Settings
from alumni_admin.core.credentials import (
    ChainedTokenProvider,
    EnvTokenProvider,
    StaticTokenProvider,
    StorageTokenProvider,
    provider_from_settings,
)


def test_static_provider_treats_empty_as_missing():
    assert StaticTokenProvider("abc").get_token() == "abc"
    assert StaticTokenProvider("").get_token() is None


def test_env_provider_reads_variable(monkeypatch):
    monkeypatch.setenv("ALUMNI_TEST_TOKEN", " env-token ")
    assert EnvTokenProvider("ALUMNI_TEST_TOKEN").get_token() == "env-token"
    monkeypatch.delenv("ALUMNI_TEST_TOKEN")
    assert EnvTokenProvider("ALUMNI_TEST_TOKEN").get_token() is None


def test_storage_provider_reads_token_key(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"token": "stored"}), encoding="utf-8")
    assert StorageTokenProvider(path).get_token() == "stored"


def test_storage_provider_ignores_missing_and_malformed_files(tmp_path):
    assert StorageTokenProvider(tmp_path / "absent.json").get_token() is None

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert StorageTokenProvider(broken).get_token() is None

    wrong_shape = tmp_path / "list.json"
    wrong_shape.write_text("[1, 2]", encoding="utf-8")
    assert StorageTokenProvider(wrong_shape).get_token() is None


def test_chain_returns_first_available_token():
    chain = ChainedTokenProvider(
        [StaticTokenProvider(None), StaticTokenProvider("second"), StaticTokenProvider("third")]
    )
    assert chain.get_token() == "second"
    assert ChainedTokenProvider([]).get_token() is None


def test_provider_from_settings_prefers_persistent_then_session_storage(tmp_path, monkeypatch):
    monkeypatch.delenv("ALUMNI_TEST_TOKEN", raising=False)
    persistent = tmp_path / "local.json"
    session = tmp_path / "session.json"
    session.write_text(json.dumps({"token": "session-token"}), encoding="utf-8")
    settings = Settings(
        api_token=None,
        token_env_var="ALUMNI_TEST_TOKEN",
        token_storage_paths=[str(persistent), str(session)],
    )

    provider = provider_from_settings(settings)
    assert provider.get_token() == "session-token"

    persistent.write_text(json.dumps({"token": "local-token"}), encoding="utf-8")
    assert provider.get_token() == "local-token"

    monkeypatch.setenv("ALUMNI_TEST_TOKEN", "env-token")
    assert provider.get_token() == "env-token"


def test_provider_from_settings_static_token_wins(monkeypatch):
    monkeypatch.setenv("ALUMNI_TEST_TOKEN", "env-token")
    settings = Settings(api_token="static", token_env_var="ALUMNI_TEST_TOKEN")
    assert provider_from_settings(settings).get_token() == "static"
