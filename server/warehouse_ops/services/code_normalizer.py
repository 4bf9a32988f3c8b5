"""Normalization of scanned / spreadsheet material codes before comparison."""

from __future__ import annotations

from typing import Any


def normalize(code: Any) -> str:
    """
    Normalize a raw code for lookup.

    None becomes "", anything else is stringified, stripped and upper-cased.
    Never raises.
    """
    if code is None:
        return ""
    return str(code).strip().upper()
