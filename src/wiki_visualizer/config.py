# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to MediaWiki access, domain whitelist, logging and row policy

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

AUTHORISED_DOMAINS = [
    "wikipedia.org",
    "wikimedia.org",
    "wikibooks.org",
    "wikiquote.org",
    "mediawiki.org",
    "wikinews.org",
    "wiktionary.org",
    "wikisource.org",
    "wikiversity.org",
]


class Config(BaseSettings):
    """Settings for page retrieval, table extraction and logging, overridable via WIKI_VISUALIZER_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="WIKI_VISUALIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # MediaWiki access
    default_project: str = Field(default="en.wikipedia.org", description="Project host used when none is given")
    authorised_domains: list[str] = Field(
        default_factory=lambda: list(AUTHORISED_DOMAINS),
        description="Domains (project host minus its first label) that pages may be fetched from",
    )
    api_scheme: Literal["http", "https"] = Field(default="https", description="Scheme used for api.php requests")
    user_agent: str = Field(
        default="wiki-visualizer/1.0 (https://meta.wikimedia.org/wiki/visualizer4wm)",
        description="User-Agent header sent to the MediaWiki API",
    )
    request_timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds for page fetches")
    fetch_attempts: int = Field(default=3, ge=1, description="Attempts for a page fetch on transport errors")

    # Table extraction policy
    strict_rows: bool = Field(
        default=False, description="Reject data rows whose cell count differs from the header instead of accepting them"
    )

    # Logging
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


_config_instance: Config | None = None


def get_config() -> Config:
    """Return the process-wide Config, reading the environment on first use."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Discard the cached Config and read WIKI_VISUALIZER_* variables again."""
    global _config_instance
    _config_instance = Config()
    return _config_instance
