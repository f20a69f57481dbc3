"""Usage errors: caller misconfiguration, raised before any measurement."""

from __future__ import annotations

import enum
from typing import TypeVar

E = TypeVar("E", bound=enum.Enum)


class UsageError(ValueError):
    """Invalid option value passed to a relationship check."""


def require_ratio(value: float, label: str = "ratio") -> float:
    """Value must lie in [0, 1]. NaN is rejected."""
    if not (0 <= value <= 1):
        raise UsageError(f"{label} must be between 0 and 1. Received {value}")
    return value


def require_non_negative(value: float, label: str = "value") -> float:
    if not value >= 0:
        raise UsageError(f"{label} must be >= 0. Received {value}")
    return value


def coerce_enum(enum_cls: type[E], value: E | str, label: str) -> E:
    """Accept an enum member or its string value."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(repr(m.value) for m in enum_cls)
        raise UsageError(f"{label} must be one of {allowed}. Received {value!r}") from None
