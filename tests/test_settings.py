import pytest

from healthbot.errors import ConfigError
from healthbot.settings import Settings


def test_missing_api_key_is_a_startup_error():
    with pytest.raises(ConfigError, match="OPENAI_API_KEY"):
        Settings.from_env({})
    with pytest.raises(ConfigError):
        Settings.from_env({"OPENAI_API_KEY": "   "})


def test_defaults():
    settings = Settings.from_env({"OPENAI_API_KEY": "sk-test"})

    assert settings.api_key == "sk-test"
    assert settings.model == "gpt-4o"
    assert settings.base_url is None
    assert settings.port == 5000
    assert settings.allowed_origins == ()


def test_overrides():
    settings = Settings.from_env({
        "OPENAI_API_KEY": "sk-test",
        "MODEL_NAME": "gemini-2.5-flash",
        "OPENAI_BASE_URL": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "LLM_TEMPERATURE": "0.5",
        "PORT": "8080",
        "ALLOWED_ORIGINS": "http://a.test, http://b.test,",
    })

    assert settings.model == "gemini-2.5-flash"
    assert settings.base_url.startswith("https://generativelanguage")
    assert settings.temperature == 0.5
    assert settings.port == 8080
    assert settings.allowed_origins == ("http://a.test", "http://b.test")


def test_bad_port_is_rejected():
    with pytest.raises(ConfigError, match="PORT"):
        Settings.from_env({"OPENAI_API_KEY": "sk-test", "PORT": "five thousand"})


def test_bad_number_keeps_original_cause():
    with pytest.raises(ConfigError) as excinfo:
        Settings.from_env({"OPENAI_API_KEY": "sk-test", "LLM_TEMPERATURE": "warm"})

    assert isinstance(excinfo.value.__cause__, ValueError)
