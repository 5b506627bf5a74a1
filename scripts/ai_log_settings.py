import os
from dataclasses import dataclass
from dotenv import load_dotenv

from ai_log_errors import ConfigError

DEFAULT_NOTION_API_URL = "https://api.notion.com/v1"
DEFAULT_NOTION_VERSION = "2022-06-28"
DEFAULT_REFORMAT_COMMAND = "gemini chat"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
REFORMATTERS = ("shell", "gemini")


@dataclass(frozen=True)
class Settings:
    notion_api_key: str
    notion_page_id: str
    notion_api_url: str = DEFAULT_NOTION_API_URL
    notion_version: str = DEFAULT_NOTION_VERSION
    reformatter: str = "shell"
    reformat_command: str = DEFAULT_REFORMAT_COMMAND
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL


def _get(environ, key, default=""):
    return (environ.get(key) or default).strip()


def load_settings(environ=None):
    """Build Settings from the environment (and .env when reading os.environ).

    NOTION_API_KEY and NOTION_PAGE_ID are required. The Gemini key is only
    required when AI_LOG_REFORMATTER=gemini.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    api_key = _get(environ, "NOTION_API_KEY")
    page_id = _get(environ, "NOTION_PAGE_ID")
    if not api_key:
        raise ConfigError("NOTION_API_KEY is not set. Add it to your .env file.")
    if not page_id:
        raise ConfigError("NOTION_PAGE_ID is not set. Add it to your .env file.")

    reformatter = _get(environ, "AI_LOG_REFORMATTER", "shell").lower()
    if reformatter not in REFORMATTERS:
        raise ConfigError(
            f"AI_LOG_REFORMATTER must be one of {', '.join(REFORMATTERS)}, got '{reformatter}'."
        )

    gemini_api_key = _get(environ, "GEMINI_API_KEY")
    if reformatter == "gemini" and not gemini_api_key:
        raise ConfigError("GEMINI_API_KEY is required when AI_LOG_REFORMATTER=gemini.")

    return Settings(
        notion_api_key=api_key,
        notion_page_id=page_id,
        notion_api_url=_get(environ, "NOTION_API_URL", DEFAULT_NOTION_API_URL).rstrip("/"),
        notion_version=_get(environ, "NOTION_VERSION", DEFAULT_NOTION_VERSION),
        reformatter=reformatter,
        reformat_command=_get(environ, "AI_LOG_REFORMAT_COMMAND", DEFAULT_REFORMAT_COMMAND),
        gemini_api_key=gemini_api_key,
        gemini_model=_get(environ, "GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
    )
