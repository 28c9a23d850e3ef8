"""Search service layer for ContentSearch.

Provides the content/channel search services and factory functions that
wire them to a configured Elasticsearch client.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from ContentSearch.services.client_apps import ClientAppsSearchService
from ContentSearch.services.search import ContentSearchService, DocumentMapper, SearchExecutor

if TYPE_CHECKING:
    from ContentSearch.config import AppConfig
    from ContentSearch.sources.elasticsearch.client import ElasticsearchApiClient


def create_client(config: AppConfig) -> ElasticsearchApiClient:
    """Create an Elasticsearch client from configuration.

    Credentials are read from the environment variables named in the config,
    never from the config file itself.

    Args:
        config: Application configuration containing cluster settings.

    Returns:
        Configured ElasticsearchApiClient instance.
    """
    from ContentSearch.sources.elasticsearch.client import ElasticsearchApiClient

    es = config.elasticsearch
    api_key = os.getenv(es.api_key_env) if es.api_key_env else None
    password = os.getenv(es.password_env) if es.password_env else None
    return ElasticsearchApiClient(
        es.host,
        timeout=es.timeout,
        max_attempts=es.max_attempts,
        api_key=api_key or None,
        username=es.username,
        password=password,
    )


def create_search_service(
    config: AppConfig,
    executor: SearchExecutor | None = None,
) -> ContentSearchService:
    """Create the content/channel search service.

    Args:
        config: Application configuration.
        executor: Optional executor; a configured HTTP client is created
            when omitted.

    Returns:
        Configured ContentSearchService instance.
    """
    return ContentSearchService(executor=executor or create_client(config), config=config.elasticsearch)


def create_client_apps_service(
    config: AppConfig,
    executor: SearchExecutor | None = None,
) -> ClientAppsSearchService:
    """Create the client-apps search service."""
    return ClientAppsSearchService(executor=executor or create_client(config), config=config.elasticsearch)


__all__ = [
    "ClientAppsSearchService",
    "ContentSearchService",
    "DocumentMapper",
    "SearchExecutor",
    "create_client",
    "create_client_apps_service",
    "create_search_service",
]
