"""Lenses focus on one part of a larger piece of data."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class Lens(ABC):
    """Reads and writes one part of a larger value."""

    @abstractmethod
    def focus(self, data: Any) -> Any:
        """The focused part of ``data``."""

    @abstractmethod
    def set(self, data: Any, value: Any) -> None:
        """Replace the focused part of ``data`` with ``value``."""


@dataclass(frozen=True)
class FieldLens(Lens):
    """A lens onto a named attribute."""

    field: str

    def focus(self, data: Any) -> Any:
        return getattr(data, self.field)

    def set(self, data: Any, value: Any) -> None:
        setattr(data, self.field, value)


def make_lens(field: str) -> FieldLens:
    """A lens onto the attribute called ``field``."""
    return FieldLens(field)