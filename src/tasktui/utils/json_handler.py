# ♥♥─── JSON Handler ─────────────────────────────────────────────────────────────
"""Whole-document JSON file helpers used by the storage backend."""

from __future__ import annotations

import os
import json
from typing import Any
from pathlib import Path

from tasktui.custom_logger import log


# ─── Read ─────────────────────────────────────────────────────────────────────
def read_json(path: str | Path) -> Any | None:
    """Parse a JSON file.

    :param path: File to read.
    :return: The decoded document, or None if the file is missing, unreadable,
        not valid JSON or nested too deeply to decode.
    """
    source = Path(path)
    if not source.is_file():
        log.info("No JSON file at '{}'", source)
        return None
    try:
        return json.loads(source.read_text(encoding="utf-8"))
    except (OSError, ValueError, RecursionError) as e:
        log.error("Could not read JSON from '{}': {}", source, e)
        return None


# ─── Write ────────────────────────────────────────────────────────────────────
def write_json_atomic(data: Any, path: str | Path, *, indent: int | None = 2) -> bool:
    """Replace a JSON file in one step.

    The document goes to ``<name>.tmp`` next to the target and is then
    renamed over it, so a crash mid-write leaves the previous file intact.

    :param data: JSON-serializable document.
    :param path: Target file; parent directories are created.
    :param indent: Indentation passed to :func:`json.dumps`.
    :return: True if the file was replaced.
    """
    target = Path(path)
    staging = target.with_name(f"{target.name}.tmp")
    try:
        payload = json.dumps(data, indent=indent, ensure_ascii=False)
        target.parent.mkdir(parents=True, exist_ok=True)
        staging.write_text(payload, encoding="utf-8")
        os.replace(staging, target)
    except (TypeError, ValueError, OSError) as e:
        log.error("Could not write JSON to '{}': {}", target, e)
        return False
    log.debug("Wrote JSON to '{}'", target)
    return True
