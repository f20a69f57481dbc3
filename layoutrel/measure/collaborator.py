"""Measurement collaborator: facade over element/page handles.

Handles are duck-typed after Playwright's Python API:

    box = await element.bounding_box()          # dict | None
    page = element.page                         # attribute or zero-arg callable
    size = page.viewport_size                   # attribute, callable, or awaitable
    await element.scroll_into_view_if_needed(timeout=5000)   # optional

Absence (unrendered element, no page, no viewport) is returned as ``None``,
never raised.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from layoutrel.utils.geometry import Rectangle, ViewportSize

logger = logging.getLogger(__name__)


@runtime_checkable
class ElementHandle(Protocol):
    async def bounding_box(self) -> Any: ...


@runtime_checkable
class PageHandle(Protocol):
    @property
    def viewport_size(self) -> Any: ...


async def _resolve(value: Any) -> Any:
    """Call zero-arg callables and await awaitables (sync or async collaborators)."""
    if callable(value):
        value = value()
    if inspect.isawaitable(value):
        value = await value
    return value


async def measure_rectangle(element: ElementHandle) -> Rectangle | None:
    box = await element.bounding_box()
    if box is None:
        logger.debug("No bounding box for %r", element)
        return None
    return Rectangle.from_box(box)


async def measure_viewport(element: ElementHandle) -> ViewportSize | None:
    """Viewport size of the page owning ``element``."""
    page = await _resolve(getattr(element, "page", None))
    if page is None:
        logger.debug("No page for %r", element)
        return None
    size = await _resolve(getattr(page, "viewport_size", None))
    if size is None:
        logger.debug("No viewport size for page %r", page)
        return None
    return ViewportSize.from_size(size)


async def measure_many(elements: Iterable[ElementHandle]) -> list[Rectangle | None]:
    """Measure all elements concurrently; results follow input order."""
    return list(await asyncio.gather(*(measure_rectangle(e) for e in elements)))


async def measure_pair(
    first: ElementHandle, second: ElementHandle
) -> tuple[Rectangle | None, Rectangle | None]:
    """Measure two elements concurrently."""
    a, b = await asyncio.gather(measure_rectangle(first), measure_rectangle(second))
    return a, b


async def scroll_into_view(element: ElementHandle, timeout_ms: float) -> bool:
    """Best-effort scroll. True on success or when the handle cannot scroll."""
    scroll = getattr(element, "scroll_into_view_if_needed", None)
    if scroll is None:
        return True
    try:
        await asyncio.wait_for(scroll(timeout=timeout_ms), timeout=timeout_ms / 1000)
    except asyncio.TimeoutError:
        logger.debug("Scroll into view timed out after %sms for %r", timeout_ms, element)
        return False
    except Exception as e:
        logger.debug("Scroll into view failed for %r: %s", element, e)
        return False
    return True
