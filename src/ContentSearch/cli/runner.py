"""Command runner for coordinating CLI execution.

Manages logging configuration, service lifecycle and error handling for
command execution.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

import click

from ContentSearch.config import AppConfig
from ContentSearch.renderers import dumps
from ContentSearch.services import create_client, create_client_apps_service, create_search_service
from ContentSearch.services.client_apps import ClientAppsSearchService
from ContentSearch.services.search import ContentSearchService
from ContentSearch.utils.log import configure_logging, log

S = TypeVar("S")


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_search(self, action: str, operation: Callable[[ContentSearchService], Any]) -> None:
        """Run ``operation`` against the content/channel search service.

        Args:
            action: The CLI command name (e.g., 'contents').
            operation: Callable producing a JSON-serializable payload.

        Raises:
            click.Abort: When the search fails.
        """
        self._run(action, create_search_service, operation)

    def run_client_apps(self, action: str, operation: Callable[[ClientAppsSearchService], Any]) -> None:
        """Run ``operation`` against the client-apps search service."""
        self._run(action, create_client_apps_service, operation)

    def _run(
        self,
        action: str,
        factory: Callable[..., S],
        operation: Callable[[S], Any],
    ) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        client = create_client(self.config)
        try:
            service = factory(self.config, client)
            payload = operation(service)
            click.echo(dumps(payload))
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action, e)
            raise click.Abort from e
        finally:
            client.close()
