import pytest
from pydantic import ValidationError

from appforger.clients.llm import LLMFactory
from appforger.config import ConfigurationError, Settings
from tests.helpers import make_settings


def test_github_pat_is_accepted_as_token(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setenv("GITHUB_PAT", "ghp_from_pat")

    settings = Settings(database_url="sqlite+aiosqlite://")

    assert settings.github_token == "ghp_from_pat"  # noqa: S105


def test_configured_flags():
    settings = make_settings(vercel_token="tok", openai_api_key="sk-test")

    assert settings.github_configured
    assert settings.vercel_configured
    assert settings.openai_configured

    bare = make_settings(github_owner=None)
    assert not bare.github_configured
    assert not bare.vercel_configured
    assert not bare.openai_configured


def test_defaults():
    settings = make_settings()

    assert settings.github_api_version == "2022-11-28"
    assert settings.repo_name_prefix == "appforger"
    assert settings.openai_model == "gpt-4o"


def test_log_level_is_normalised():
    assert make_settings(log_level="debug").log_level == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        make_settings(log_level="loud")


def test_llm_factory_requires_api_key():
    settings = make_settings()

    assert not LLMFactory.is_configured(settings)
    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        LLMFactory.create_json_llm(settings)


def test_llm_factory_builds_json_model():
    llm = LLMFactory.create_json_llm(make_settings(openai_api_key="sk-test"))

    assert llm.kwargs["response_format"] == {"type": "json_object"}
    assert llm.bound.model_name == "gpt-4o"
