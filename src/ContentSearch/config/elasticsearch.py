"""Elasticsearch cluster and index configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ContentSearch.config.common import (
    expect_float,
    expect_int,
    expect_optional_str,
    expect_str,
    get_required_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class ElasticsearchConfig:
    """Store validated cluster connection and index settings.

    Attributes:
        host: Base URL of the cluster.
        content_index: Index (or alias) holding content documents.
        channel_index: Index (or alias) holding channel/transmission documents.
        timeout: Per-request timeout in seconds.
        max_attempts: Attempts per request for transient failures.
        api_key_env: Name of the environment variable holding an API key.
        username: Basic-auth user, used when no API key is configured.
        password_env: Name of the environment variable holding the password.
    """

    host: str
    content_index: str
    channel_index: str
    timeout: float = 30.0
    max_attempts: int = 3
    api_key_env: str | None = None
    username: str | None = None
    password_env: str | None = None


def load_elasticsearch(raw: Mapping[str, Any]) -> ElasticsearchConfig:
    """Load the ``elasticsearch`` section from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "elasticsearch", required=True)
    return ElasticsearchConfig(
        host=expect_str(get_required_value(section, "host", "elasticsearch.host"), "elasticsearch.host").strip(),
        content_index=expect_str(
            get_required_value(section, "content_index", "elasticsearch.content_index"),
            "elasticsearch.content_index",
        ).strip(),
        channel_index=expect_str(
            get_required_value(section, "channel_index", "elasticsearch.channel_index"),
            "elasticsearch.channel_index",
        ).strip(),
        timeout=expect_float(section.get("timeout", 30.0), "elasticsearch.timeout"),
        max_attempts=expect_int(section.get("max_attempts", 3), "elasticsearch.max_attempts"),
        api_key_env=expect_optional_str(section.get("api_key_env"), "elasticsearch.api_key_env"),
        username=expect_optional_str(section.get("username"), "elasticsearch.username"),
        password_env=expect_optional_str(section.get("password_env"), "elasticsearch.password_env"),
    )


def check_elasticsearch(config: ElasticsearchConfig) -> None:
    """Validate cluster constraints.

    Raises:
        ValueError: If values violate cluster constraints.
    """
    if not config.host:
        raise ValueError("elasticsearch.host must not be empty")
    if not config.host.startswith(("http://", "https://")):
        raise ValueError("elasticsearch.host must start with http:// or https://")
    if not config.content_index:
        raise ValueError("elasticsearch.content_index must not be empty")
    if not config.channel_index:
        raise ValueError("elasticsearch.channel_index must not be empty")
    if config.timeout <= 0:
        raise ValueError("elasticsearch.timeout must be positive")
    if config.max_attempts <= 0:
        raise ValueError("elasticsearch.max_attempts must be positive")
    if config.password_env and not config.username:
        raise ValueError("elasticsearch.password_env requires elasticsearch.username")
