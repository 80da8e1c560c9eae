"""How a region is filled: a solid color or a linear gradient."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .colors import Color
from .geometry import Point


@dataclass(frozen=True)
class SolidPaint:
    """Fill with a solid color."""

    color: Color

    def vger_paint(self, painter: Any) -> Any:
        """Register this paint with ``painter`` and return its paint index."""
        return painter.color_paint(self.color)


@dataclass(frozen=True)
class GradientPaint:
    """Fill with a linear gradient between two colors."""

    start: Point
    end: Point
    inner_color: Color
    outer_color: Color

    def vger_paint(self, painter: Any) -> Any:
        """Register this paint with ``painter`` and return its paint index."""
        return painter.linear_gradient(
            self.start, self.end, self.inner_color, self.outer_color, 0.0
        )


Paint = Union[SolidPaint, GradientPaint]