"""Suite runner: evaluates a batch of named checks against a layout snapshot."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

from layoutrel.engine.registry import Arity, CheckRegistry, get_registry
from layoutrel.errors import UsageError
from layoutrel.models.checks import CheckRequest, CheckResult, SuiteResult
from layoutrel.models.snapshot import LayoutSnapshot

logger = logging.getLogger(__name__)

_ARITY_COUNTS = {Arity.ONE: 1, Arity.PAIR: 2}


def _passed(request: CheckRequest, value: Any) -> bool:
    outcomes = []
    if request.expect is not None:
        outcomes.append(isinstance(value, bool) and value == request.expect)
    if request.min is not None:
        outcomes.append(value is not None and value >= request.min)
    if request.max is not None:
        outcomes.append(value is not None and value <= request.max)
    if not outcomes:
        # Without expectations a predicate must hold and a measurement must exist
        return value is True if isinstance(value, bool) else value is not None
    return all(outcomes)


class CheckSuite:
    """Runs check requests concurrently and collects per-check results."""

    def __init__(self, registry: CheckRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    async def run(self, snapshot: LayoutSnapshot, requests: list[CheckRequest]) -> SuiteResult:
        start = time.perf_counter()
        logger.info("Suite: %d checks queued", len(requests))

        results = list(await asyncio.gather(*(self._run_one(snapshot, r) for r in requests)))

        suite = SuiteResult(results=results)
        for result in results:
            if result.error:
                suite.errors[result.label] = result.error
            elif result.passed:
                suite.checks_passed += 1
            else:
                suite.checks_failed += 1
        suite.processing_time_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "Suite complete: %d passed, %d failed, %d errors in %.1fms",
            suite.checks_passed,
            suite.checks_failed,
            len(suite.errors),
            suite.processing_time_ms,
        )
        return suite

    async def _run_one(self, snapshot: LayoutSnapshot, request: CheckRequest) -> CheckResult:
        label = request.display_name
        result = CheckResult(label=label, check=request.check)
        t0 = time.perf_counter()
        try:
            value = await self._evaluate(snapshot, request)
        except UsageError as e:
            result.error = str(e)
            logger.warning("  %s FAILED: %s", label, e)
            return result
        result.value = value
        result.passed = _passed(request, value)
        result.elapsed_ms = (time.perf_counter() - t0) * 1000
        logger.debug("  %s -> %r in %.1fms", label, value, result.elapsed_ms)
        return result

    async def _evaluate(self, snapshot: LayoutSnapshot, request: CheckRequest) -> Any:
        if request.check not in self.registry:
            raise UsageError(f"Unknown check: {request.check}")
        spec = self.registry.get(request.check)

        page = snapshot.page()
        handles = [snapshot.element(name, page) for name in request.elements]

        if spec.arity is Arity.SEQUENCE:
            call_args: list[Any] = [handles]
        else:
            expected = _ARITY_COUNTS[spec.arity]
            if len(handles) != expected:
                raise UsageError(
                    f"{spec.name} takes {expected} element(s), got {len(handles)}"
                )
            call_args = list(handles)

        try:
            pending = spec.fn(*call_args, **request.args)
        except TypeError as e:
            raise UsageError(f"Bad arguments for {spec.name}: {e}") from None
        return await pending
