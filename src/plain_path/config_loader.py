"""Configuration file loading: JSONC parsing and env substitution."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import commentjson

from .util.log import Log

log = Log.create({"service": "config.loader"})


def substitute_env_vars(text: str) -> str:
    """Replace ``{env:VAR}`` patterns with environment variable values."""
    def replacer(match: re.Match[str]) -> str:
        return os.environ.get(match.group(1), "")

    return re.sub(r"\{env:([^}]+)\}", replacer, text)


def load_json_file(filepath: str) -> Any:
    """Load a JSON or JSONC file, returning ``{}`` on any I/O or parse error."""
    path = Path(filepath)
    if not path.exists():
        return {}

    try:
        text = substitute_env_vars(path.read_text(encoding="utf-8"))
        return commentjson.loads(text)
    except (
        OSError,
        ValueError,
        commentjson.ParserException,
        commentjson.JSONLibraryException,
    ) as e:
        log.error("failed to load config file", {"path": filepath, "error": str(e)})
        return {}
