"""GitGet: list a GitHub account's public repositories as compact JSON."""

from .runner import build_context, cli, main, run

__all__ = ["build_context", "cli", "main", "run"]
