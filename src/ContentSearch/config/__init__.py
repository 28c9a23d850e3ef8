from __future__ import annotations

"""Public configuration API for ContentSearch."""

from ContentSearch.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from ContentSearch.config.elasticsearch import ElasticsearchConfig
from ContentSearch.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "ElasticsearchConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
