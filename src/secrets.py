"""Utilities for loading local (gitignored) credentials and API tokens."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_SECRETS_FILENAME = "local_secrets.json"


def _default_secrets_path() -> Path:
    root = Path(__file__).resolve().parents[1]
    return root / DEFAULT_SECRETS_FILENAME


def load_local_secrets(path: Optional[str | Path] = None) -> Dict[str, Any]:
    """Load secrets from a JSON file; return {} when unavailable."""

    candidate = path or os.getenv("LOCAL_SECRETS_FILE") or _default_secrets_path()
    secrets_path = Path(candidate).expanduser()
    if not secrets_path.exists():
        return {}
    try:
        with secrets_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
            return data if isinstance(data, dict) else {}
    except (OSError, ValueError):
        return {}


def read_auth_token(path: Optional[str | Path]) -> Optional[str]:
    """Read a GitHub API token from `path`; return None when absent or unreadable.

    Read failures are reported on stderr and never raised, so the caller can
    fall back to an unauthenticated request. The token itself is never printed.
    """

    if not path:
        return None
    token_path = Path(path).expanduser()
    try:
        token = token_path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"[error] could not read auth token from {token_path}: {exc}", file=sys.stderr)
        return None
    if not token:
        print(f"[warn] auth token file {token_path} is empty; continuing unauthenticated",
              file=sys.stderr)
        return None
    return token


__all__ = ["load_local_secrets", "read_auth_token", "DEFAULT_SECRETS_FILENAME"]
