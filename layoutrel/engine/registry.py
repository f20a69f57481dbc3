"""Check registry: every relationship check is an async function registered via decorator.

Usage:
    @check(name="are_aligned", arity=Arity.PAIR, description="...")
    async def are_aligned(first, second, *, axis, mode, tolerance=1.0) -> bool:
        ...

The suite looks checks up by name, so a batch of checks can be described
as data (see ``layoutrel.models.checks.CheckRequest``).
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)


class Arity(enum.Enum):
    """How many element handles a check consumes."""

    ONE = "one"
    PAIR = "pair"
    SEQUENCE = "sequence"


@dataclass
class CheckSpec:
    name: str
    arity: Arity
    fn: Callable[..., Awaitable[Any]]
    description: str = ""


class CheckRegistry:
    """Registry of named relationship checks."""

    def __init__(self) -> None:
        self._checks: dict[str, CheckSpec] = {}

    def register(self, spec: CheckSpec) -> None:
        if spec.name in self._checks:
            raise ValueError(f"Duplicate check name: {spec.name}")
        self._checks[spec.name] = spec
        logger.debug("Registered check %s (%s)", spec.name, spec.arity.value)

    def get(self, name: str) -> CheckSpec:
        return self._checks[name]

    def __contains__(self, name: object) -> bool:
        return name in self._checks

    def all(self) -> list[CheckSpec]:
        return sorted(self._checks.values(), key=lambda s: s.name)

    @property
    def count(self) -> int:
        return len(self._checks)


# Module-level singleton
_registry = CheckRegistry()


def get_registry() -> CheckRegistry:
    return _registry


def check(*, name: str, arity: Arity, description: str = ""):
    """Decorator to register a relationship check."""

    def decorator(fn: Callable[..., Awaitable[Any]]):
        _registry.register(CheckSpec(name=name, arity=arity, fn=fn, description=description))
        return fn

    return decorator
