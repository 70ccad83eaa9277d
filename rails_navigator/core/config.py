from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from rails_navigator.core import constants as cs

load_dotenv()


class NavigatorSettings(BaseSettings):
    """Command-line settings, loaded from `RAILS_NAV_*` environment variables or a .env file.

    The Rails naming conventions are deliberately not settings; they are passed
    to the resolver as `NavigationConventions`.
    """

    model_config = SettingsConfigDict(
        env_prefix=cs.ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Path | None = None
    QUIET: bool = False
    JSON_OUTPUT: bool = False


settings = NavigatorSettings()
