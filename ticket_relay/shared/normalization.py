from __future__ import annotations
from typing import Any, Optional


def normalize_str_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    s = str(value).strip()
    return s or None

def text_or_empty(value: Any) -> str:
    """Render a loosely typed form value as text, ``""`` for missing values."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
