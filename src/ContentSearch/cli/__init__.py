"""CLI package for ContentSearch.

Thin command-line driver over the search services, mainly for inspecting
queries and results against a live cluster.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from ContentSearch.cli.runner import CommandRunner
from ContentSearch.cli.ui import cli


def main() -> None:
    """Run ContentSearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
