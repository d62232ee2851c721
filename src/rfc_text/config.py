"""
Configuration management using Pydantic Settings.

Provides type-safe access to:
- RFC source URL templates (config/sources.yaml, overridable via RFC_* env vars)
- HTTP transport settings (timeout, user agent)
- MongoDB connection settings for the optional document cache
"""

from pathlib import Path
from typing import Optional
import logging

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


def _find_config_file(name: str) -> Optional[Path]:
    """Locate config/{name} relative to the project root, then the working directory."""
    project_root = Path(__file__).parent.parent.parent  # src/rfc_text/config.py -> root
    for candidate in (project_root / 'config' / name, Path('config') / name):
        if candidate.exists():
            return candidate
    return None


class SourcesConfig(BaseSettings):
    """
    Where RFC documents are fetched from.

    Values come from config/sources.yaml; explicit keyword arguments and
    RFC_* environment variables take precedence over the file. When the file
    is missing (e.g., installed without the repo checkout) the field defaults
    below apply.

    Attributes:
        base_url: Root of the RFC repository
        html_url_template: Template for the structured HTML variant
        text_url_template: Template for the plain-text variant

    Example:
        >>> config = SourcesConfig()
        >>> config.text_url('2616')
        'https://www.ietf.org/rfc/rfc2616.txt'
    """

    base_url: str = Field(
        default="https://www.ietf.org/rfc",
        description="Root of the RFC repository (no trailing slash)"
    )
    html_url_template: str = Field(
        default="{base_url}/rfc{number}/",
        description="URL template for the HTML variant"
    )
    text_url_template: str = Field(
        default="{base_url}/rfc{number}.txt",
        description="URL template for the plain-text variant"
    )

    model_config = SettingsConfigDict(
        env_prefix='RFC_',
        extra='ignore'
    )

    @model_validator(mode='before')
    @classmethod
    def load_yaml_config(cls, data: dict) -> dict:
        """Merge config/sources.yaml underneath any explicitly provided values."""
        config_path = _find_config_file('sources.yaml')
        if config_path is None:
            logger.debug("config/sources.yaml not found, using built-in source defaults")
            return data

        with open(config_path, 'r', encoding='utf-8') as f:
            yaml_data = yaml.safe_load(f) or {}

        merged = {
            key: yaml_data[key]
            for key in ('base_url', 'html_url_template', 'text_url_template')
            if key in yaml_data
        }
        merged.update(data or {})
        return merged

    def html_url(self, number: str) -> str:
        """URL of the HTML variant for an RFC number."""
        return self.html_url_template.format(
            base_url=self.base_url.rstrip('/'), number=number
        )

    def text_url(self, number: str) -> str:
        """URL of the plain-text variant for an RFC number."""
        return self.text_url_template.format(
            base_url=self.base_url.rstrip('/'), number=number
        )


# Singleton pattern - loaded once, cached forever
_sources_config: Optional[SourcesConfig] = None


def get_sources_config() -> SourcesConfig:
    """
    Get global sources config instance (lazy-loaded singleton).

    Returns:
        Singleton SourcesConfig instance
    """
    global _sources_config
    if _sources_config is None:
        _sources_config = SourcesConfig()
    return _sources_config


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Environment Variables (from .env):
        REQUEST_TIMEOUT: Seconds before an HTTP fetch is abandoned
        USER_AGENT: User-Agent header sent with every fetch
        MONGO_HOST: MongoDB host (e.g., "localhost:27017")
        DB_NAME: MongoDB database name (e.g., "RFC")
        COLLECTION_NAME: MongoDB collection name (e.g., "documents")

    Example:
        >>> config = get_app_config()
        >>> config.request_timeout
        30.0
        >>> config.mongodb_uri
        'mongodb://localhost:27017/'
    """

    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP fetch timeout in seconds"
    )

    user_agent: str = Field(
        default="rfc-text/0.1.0",
        description="User-Agent header for RFC fetches"
    )

    mongo_host: str = Field(
        default="localhost:27017",
        description="MongoDB host address"
    )

    db_name: str = Field(
        default="RFC",
        description="MongoDB database name"
    )

    collection_name: str = Field(
        default="documents",
        description="MongoDB collection name for cached RFC documents"
    )

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    @property
    def mongodb_uri(self) -> str:
        """Construct MongoDB URI from host."""
        return f"mongodb://{self.mongo_host}/"


# Singleton pattern - loaded once, cached forever
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """
    Get global application config instance (lazy-loaded singleton).

    Returns:
        Singleton AppConfig instance
    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config
