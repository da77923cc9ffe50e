"""Configuration constants and CLI settings for the GitGet repository listing."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import List, Optional

from src.secrets import load_local_secrets

from .models import Mode, SortKey


def _env_timeout(name: str) -> Optional[float]:
    """Read a timeout in seconds from the environment; None (no timeout) when unset or invalid."""
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        print(f"[warn] ignoring {name}={raw!r}: not a number of seconds", file=sys.stderr)
        return None


_SECRETS = load_local_secrets()

BASE_URL = os.getenv("GITGET_BASE_URL", "https://api.github.com")
USER_AGENT = os.getenv("GITGET_USER_AGENT", "GitGet v1.0")
TIME_ZONE = os.getenv("GITGET_TIME_ZONE", "America/Chicago")
# unset = requests default (no timeout)
REQUEST_TIMEOUT = _env_timeout("GITGET_REQUEST_TIMEOUT")
DEFAULT_DESCRIPTION = "No description."
DEFAULT_MODE = Mode.WRITE.value
DEFAULT_SORT = SortKey.PUSHED.value
DEFAULT_OUTPUT_PATH = "./output.json"
DEFAULT_USERNAME: Optional[str] = _SECRETS.get("username")
DEFAULT_AUTH_TOKEN_PATH: Optional[str] = _SECRETS.get("auth_token_path")


@dataclass(frozen=True)
class GitGetSettings:
    """Resolved runtime settings for one GitGet invocation."""

    username: Optional[str]
    auth_token_path: Optional[str]
    mode: str
    output_path: Optional[str]
    sort: str


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the GitGet entry point."""

    parser = argparse.ArgumentParser(
        description="List a GitHub account's public repositories, most recent first.",
    )
    parser.add_argument("username", nargs="?", default=DEFAULT_USERNAME)
    parser.add_argument("--auth", dest="auth_token_path", default=DEFAULT_AUTH_TOKEN_PATH,
                        help="path to a file holding a GitHub API token")
    parser.add_argument("--mode", default=DEFAULT_MODE,
                        help="'write' saves JSON to --output, 'return' prints it")
    parser.add_argument("--output", dest="output_path", default=DEFAULT_OUTPUT_PATH)
    parser.add_argument("--sort", default=DEFAULT_SORT,
                        choices=[key.value for key in SortKey])
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    parser = build_arg_parser()
    return parser.parse_args(argv)


def resolve_settings(args: Optional[argparse.Namespace] = None) -> GitGetSettings:
    """Return immutable settings built from parsed CLI arguments."""

    args = args or parse_args()
    return GitGetSettings(
        username=args.username,
        auth_token_path=args.auth_token_path,
        mode=args.mode,
        output_path=args.output_path,
        sort=args.sort,
    )


__all__ = [
    "BASE_URL",
    "USER_AGENT",
    "TIME_ZONE",
    "REQUEST_TIMEOUT",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_MODE",
    "DEFAULT_SORT",
    "DEFAULT_OUTPUT_PATH",
    "DEFAULT_USERNAME",
    "DEFAULT_AUTH_TOKEN_PATH",
    "GitGetSettings",
    "build_arg_parser",
    "parse_args",
    "resolve_settings",
]
