"""Two-dimensional geometry used for layout: points, vectors, sizes, rectangles and transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector:
    """A displacement in the plane."""

    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> Vector:
        return Vector()

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vector:
        if isinstance(factor, (Vector, Point, Size)):
            return NotImplemented
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def lerp(self, other: Vector, t: float) -> Vector:
        """Linear interpolation: ``self`` at ``t == 0``, ``other`` at ``t == 1``."""
        return self * (1.0 - t) + other * t


@dataclass(frozen=True)
class Point:
    """A position in the plane."""

    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> Point:
        return Point()

    def __add__(self, other: Vector) -> Point:
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point | Vector) -> Vector | Point:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: float = 0.0
    height: float = 0.0

    def __sub__(self, other: Size) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width - other.width, self.height - other.height)

    def __truediv__(self, factor: float) -> Size:
        return Size(self.width / factor, self.height / factor)

    def to_vector(self) -> Vector:
        return Vector(self.width, self.height)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its origin (minimum corner) and size."""

    origin: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    def min_x(self) -> float:
        return self.origin.x

    def max_x(self) -> float:
        return self.origin.x + self.size.width

    def min_y(self) -> float:
        return self.origin.y

    def max_y(self) -> float:
        return self.origin.y + self.size.height

    def width(self) -> float:
        return self.size.width

    def height(self) -> float:
        return self.size.height

    def min(self) -> Point:
        return Point(self.min_x(), self.min_y())

    def max(self) -> Point:
        return Point(self.max_x(), self.max_y())

    def center(self) -> Point:
        return self.origin + (self.size / 2.0).to_vector()

    def is_empty(self) -> bool:
        return not (self.size.width > 0 and self.size.height > 0)

    def contains(self, point: Point) -> bool:
        return (
            self.min_x() <= point.x < self.max_x()
            and self.min_y() <= point.y < self.max_y()
        )

    def intersects(self, other: Rect) -> bool:
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.min_x() < other.max_x()
            and other.min_x() < self.max_x()
            and self.min_y() < other.max_y()
            and other.min_y() < self.max_y()
        )

    def union(self, other: Rect) -> Rect:
        """Smallest rectangle containing both; empty rectangles are ignored."""
        if other.is_empty():
            return self
        if self.is_empty():
            return other
        low = Point(min(self.min_x(), other.min_x()), min(self.min_y(), other.min_y()))
        high = Point(max(self.max_x(), other.max_x()), max(self.max_y(), other.max_y()))
        return _rect_from_corners(low, high)

    def translate(self, offset: Vector) -> Rect:
        return Rect(self.origin + offset, self.size)


def _rect_from_corners(low: Point, high: Point) -> Rect:
    return Rect(low, Size(high.x - low.x, high.y - low.y))


@dataclass(frozen=True)
class Transform:
    """A 2D affine transform acting on row vectors: ``p' = p * M``."""

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m31: float = 0.0
    m32: float = 0.0

    @staticmethod
    def identity() -> Transform:
        return Transform()

    @staticmethod
    def translation(dx: float, dy: float) -> Transform:
        return Transform(m31=dx, m32=dy)

    def then_translate(self, offset: Vector) -> Transform:
        return self.then(Transform.translation(offset.x, offset.y))

    def then(self, other: Transform) -> Transform:
        """The transform that applies ``self`` first and ``other`` afterwards."""
        return Transform(
            m11=self.m11 * other.m11 + self.m12 * other.m21,
            m12=self.m11 * other.m12 + self.m12 * other.m22,
            m21=self.m21 * other.m11 + self.m22 * other.m21,
            m22=self.m21 * other.m12 + self.m22 * other.m22,
            m31=self.m31 * other.m11 + self.m32 * other.m21 + other.m31,
            m32=self.m31 * other.m12 + self.m32 * other.m22 + other.m32,
        )

    def transform_point(self, point: Point) -> Point:
        return Point(
            point.x * self.m11 + point.y * self.m21 + self.m31,
            point.x * self.m12 + point.y * self.m22 + self.m32,
        )

    def transform_rect(self, rect: Rect) -> Rect:
        """Bounding box of the transformed corners of ``rect``."""
        corners = [
            self.transform_point(Point(x, y))
            for x in (rect.min_x(), rect.max_x())
            for y in (rect.min_y(), rect.max_y())
        ]
        low = Point(min(p.x for p in corners), min(p.y for p in corners))
        high = Point(max(p.x for p in corners), max(p.y for p in corners))
        return _rect_from_corners(low, high)