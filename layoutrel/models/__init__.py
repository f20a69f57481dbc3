"""Input/output models for snapshots and check batches."""

from layoutrel.models.checks import CheckRequest, CheckResult, SuiteResult
from layoutrel.models.snapshot import BoxModel, LayoutSnapshot, ViewportModel

__all__ = [
    "BoxModel",
    "CheckRequest",
    "CheckResult",
    "LayoutSnapshot",
    "SuiteResult",
    "ViewportModel",
]
