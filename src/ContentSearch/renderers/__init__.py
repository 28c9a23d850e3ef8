"""Output renderers for command results."""

from __future__ import annotations

from ContentSearch.renderers.json import dumps, render_collection, render_suggestions

__all__ = [
    "dumps",
    "render_collection",
    "render_suggestions",
]
