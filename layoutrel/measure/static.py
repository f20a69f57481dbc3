"""In-memory collaborator over recorded rectangles."""

from __future__ import annotations

from layoutrel.utils.geometry import Rectangle, ViewportSize


class StaticPage:
    """Page whose viewport is fixed; ``None`` means the size is unknown."""

    def __init__(self, viewport: ViewportSize | None = None) -> None:
        self._viewport = viewport

    @property
    def viewport_size(self) -> ViewportSize | None:
        return self._viewport

    def __repr__(self) -> str:
        return f"StaticPage({self._viewport!r})"


class StaticElement:
    """Element with a recorded box. ``rect=None`` models a detached/unrendered element."""

    def __init__(
        self,
        rect: Rectangle | None,
        page: StaticPage | None = None,
        name: str = "",
    ) -> None:
        self.rect = rect
        self.page = page
        self.name = name

    async def bounding_box(self) -> Rectangle | None:
        return self.rect

    def __repr__(self) -> str:
        return f"StaticElement({self.name or self.rect!r})"
