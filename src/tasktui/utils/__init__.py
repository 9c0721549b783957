# ♥♥─── Utils Init ───────────────────────────────────────────────────────────────
from __future__ import annotations

from .json_handler import read_json, write_json_atomic


__all__ = ["read_json", "write_json_atomic"]
