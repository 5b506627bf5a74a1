import pytest

from ai_log_errors import ConfigError
from ai_log_settings import DEFAULT_NOTION_API_URL, load_settings


def test_required_values_are_stripped():
    settings = load_settings({"NOTION_API_KEY": " secret \n", "NOTION_PAGE_ID": " page "})
    assert settings.notion_api_key == "secret"
    assert settings.notion_page_id == "page"
    assert settings.notion_api_url == DEFAULT_NOTION_API_URL
    assert settings.reformatter == "shell"
    assert settings.reformat_command == "gemini chat"


def test_missing_page_id_is_config_error():
    with pytest.raises(ConfigError, match="NOTION_PAGE_ID"):
        load_settings({"NOTION_API_KEY": "secret"})


def test_missing_api_key_is_config_error():
    with pytest.raises(ConfigError, match="NOTION_API_KEY"):
        load_settings({"NOTION_PAGE_ID": "page", "NOTION_API_KEY": "   "})


def test_gemini_requires_key():
    env = {"NOTION_API_KEY": "k", "NOTION_PAGE_ID": "p", "AI_LOG_REFORMATTER": "gemini"}
    with pytest.raises(ConfigError, match="GEMINI_API_KEY"):
        load_settings(env)
    settings = load_settings({**env, "GEMINI_API_KEY": "g", "GEMINI_MODEL": "gemini-pro"})
    assert settings.reformatter == "gemini"
    assert settings.gemini_model == "gemini-pro"


def test_unknown_reformatter_rejected():
    with pytest.raises(ConfigError, match="AI_LOG_REFORMATTER"):
        load_settings({"NOTION_API_KEY": "k", "NOTION_PAGE_ID": "p", "AI_LOG_REFORMATTER": "x"})


def test_api_url_trailing_slash_removed():
    settings = load_settings({
        "NOTION_API_KEY": "k",
        "NOTION_PAGE_ID": "p",
        "NOTION_API_URL": "http://localhost:9000/v1/",
    })
    assert settings.notion_api_url == "http://localhost:9000/v1"
