"""Offsets that align a child rectangle within a parent rectangle."""

from __future__ import annotations

from enum import Enum

from .geometry import Rect, Vector


class HAlignment(Enum):
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


class VAlignment(Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


def _h_offset(child: Rect, parent: Rect, halign: HAlignment, centered: float) -> float:
    if halign is HAlignment.LEADING:
        return parent.min_x() - child.min_x()
    if halign is HAlignment.TRAILING:
        return parent.max_x() - child.max_x()
    return centered


def _v_offset(child: Rect, parent: Rect, valign: VAlignment, centered: float) -> float:
    if valign is VAlignment.TOP:
        return parent.max_y() - child.max_y()
    if valign is VAlignment.BOTTOM:
        return parent.min_y() - child.min_y()
    return centered


def align_h(child: Rect, parent: Rect, align: HAlignment) -> Vector:
    """Align horizontally as requested, centering vertically."""
    c_off = parent.center() - child.center()
    return Vector(_h_offset(child, parent, align, c_off.x), c_off.y)


def align_v(child: Rect, parent: Rect, align: VAlignment) -> Vector:
    """Align vertically as requested, centering horizontally."""
    c_off = parent.center() - child.center()
    return Vector(c_off.x, _v_offset(child, parent, align, c_off.y))


def align(child: Rect, parent: Rect, halign: HAlignment, valign: VAlignment) -> Vector:
    """Offset to apply to ``child`` so it is aligned within ``parent``."""
    c_off = parent.center() - child.center()
    return Vector(
        _h_offset(child, parent, halign, c_off.x),
        _v_offset(child, parent, valign, c_off.y),
    )