"""A region of the plane made of a collection of rectangles."""

from __future__ import annotations

from functools import reduce

from .geometry import Rect, Vector


class Region:
    """A set of rectangles; only non-empty rectangles are added."""

    def __init__(self) -> None:
        self._rects: list[Rect] = []

    @staticmethod
    def from_rect(rect: Rect) -> Region:
        region = Region()
        region._rects.append(rect)
        return region

    def __repr__(self) -> str:
        return f"Region({self._rects!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return self._rects == other._rects

    def rects(self) -> tuple[Rect, ...]:
        """The rectangles making up this region."""
        return tuple(self._rects)

    def add_rect(self, rect: Rect) -> None:
        if not rect.is_empty():
            self._rects.append(rect)

    def set_rect(self, rect: Rect) -> None:
        """Replace this region with a single rectangle."""
        self.clear()
        self.add_rect(rect)

    def clear(self) -> None:
        self._rects.clear()

    def bounding_box(self) -> Rect:
        """A rectangle containing the whole region; the default rectangle if empty."""
        if not self._rects:
            return Rect()
        return reduce(Rect.union, self._rects[1:], self._rects[0])

    def intersects(self, rect: Rect) -> bool:
        return any(r.intersects(rect) for r in self._rects)

    def is_empty(self) -> bool:
        return not self._rects

    def union_with(self, other: Region) -> None:
        """Include everything in ``other``."""
        self._rects.extend(other._rects)

    def __iadd__(self, offset: Vector) -> Region:
        self._rects = [r.translate(offset) for r in self._rects]
        return self

    def __isub__(self, offset: Vector) -> Region:
        self._rects = [r.translate(-offset) for r in self._rects]
        return self