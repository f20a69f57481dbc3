"""Check request/result models for batch evaluation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CheckRequest(BaseModel):
    check: str = Field(..., description="Registered check name, e.g. 'relative_position'")
    elements: list[str] = Field(..., description="Snapshot element names, in argument order")
    args: dict[str, Any] = Field(
        default_factory=dict,
        description="Remaining arguments (direction, order, options)",
    )
    label: str = Field(default="", description="Display name; defaults to check + elements")
    expect: bool | None = Field(default=None, description="Expected boolean result")
    min: float | None = Field(default=None, description="Lower bound for numeric results")
    max: float | None = Field(default=None, description="Upper bound for numeric results")

    @property
    def display_name(self) -> str:
        return self.label or f"{self.check}({', '.join(self.elements)})"


class CheckResult(BaseModel):
    label: str
    check: str
    value: bool | float | None = None
    passed: bool = False
    elapsed_ms: float = 0.0
    error: str = ""


class SuiteResult(BaseModel):
    results: list[CheckResult] = Field(default_factory=list)
    processing_time_ms: float = 0.0
    checks_passed: int = 0
    checks_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.checks_failed == 0 and not self.errors
