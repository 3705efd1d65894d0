from __future__ import annotations

from typing import Iterable, Optional, Union

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_int(value, field_name: str, *, default: Optional[int] = None) -> int:
    if value is None or value == "":
        if default is None:
            raise ValidationError(f"{field_name} is required")
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number") from None


def require_float(value, field_name: str, *, default: float) -> float:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None


def split_identifiers(raw: Union[str, Iterable[str], None]) -> tuple[str, ...]:
    """Normalize a comma-separated (or already split) identifier list.

    Entries are trimmed, blanks dropped and duplicates removed keeping the
    first occurrence, so the result keeps the order the operator typed.
    """
    if raw is None:
        return ()
    parts = raw.split(",") if isinstance(raw, str) else list(raw)

    seen: list[str] = []
    for part in parts:
        item = str(part).strip()
        if item and item not in seen:
            seen.append(item)
    return tuple(seen)
