from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class ScraperSettings(BaseSettings):
    """
    Environment-driven settings for the forum index scraper.
    """

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    # ---- Fetching ----
    forum_url: str = Field(
        default="https://forum.elster.de/anwenderforum/",
        alias="ELSTER_FORUM_URL",
    )

    request_timeout_sec: float = Field(default=15.0, alias="ELSTER_REQUEST_TIMEOUT_SEC")
    request_delay_sec: float = Field(default=0.5, alias="ELSTER_REQUEST_DELAY_SEC")

    max_retries: int = Field(default=2, alias="ELSTER_MAX_RETRIES")
    backoff_base_sec: float = Field(default=1.0, alias="ELSTER_BACKOFF_BASE_SEC")
    backoff_max_sec: float = Field(default=20.0, alias="ELSTER_BACKOFF_MAX_SEC")

    user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        alias="ELSTER_USER_AGENT",
    )

    # ---- Output ----
    # Empty string disables the JSON file.
    output_path: str = Field(default="forums.json", alias="ELSTER_OUTPUT_PATH")
    print_summary: bool = Field(default=True, alias="ELSTER_PRINT_SUMMARY")

    dump_html_on_empty: bool = Field(default=True, alias="ELSTER_DUMP_HTML_ON_EMPTY")
    dump_html_path: str = Field(default="debug_forum_index.html", alias="ELSTER_DUMP_HTML_PATH")


def load_settings() -> ScraperSettings:
    return ScraperSettings()
