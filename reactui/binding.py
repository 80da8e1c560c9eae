"""Bindings read and write values owned by a source of truth in a context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, TypeVar, Union

from .context import Context, StateHandle
from .lens import Lens

T = TypeVar("T")


class Binding(ABC):
    """Reads or writes a value owned by a source of truth."""

    @abstractmethod
    def get(self, cx: Context) -> Any:
        """The current value."""

    @abstractmethod
    def get_mut(self, cx: Context) -> Any:
        """The current value, marking its state as changed."""

    @abstractmethod
    def set(self, cx: Context, value: Any) -> None:
        """Replace the value."""

    def with_(self, cx: Context, f: Callable[[Any], T]) -> T:
        return f(self.get(cx))

    def with_mut(self, cx: Context, f: Callable[[Any], T]) -> T:
        """Call ``f`` on the value, which it may change in place."""
        return f(self.get_mut(cx))


@dataclass(frozen=True)
class StateBinding(Binding):
    """A binding to state held directly in the context."""

    handle: StateHandle

    def get(self, cx: Context) -> Any:
        return cx.get(self.handle)

    def get_mut(self, cx: Context) -> Any:
        return cx.get_mut(self.handle)

    def set(self, cx: Context, value: Any) -> None:
        cx[self.handle] = value


@dataclass(frozen=True)
class MapBinding(Binding):
    """A binding to the part of another binding's value picked out by a lens."""

    binding: Binding
    lens: Lens

    def get(self, cx: Context) -> Any:
        return self.lens.focus(self.binding.get(cx))

    def get_mut(self, cx: Context) -> Any:
        return self.lens.focus(self.binding.get_mut(cx))

    def set(self, cx: Context, value: Any) -> None:
        self.lens.set(self.binding.get_mut(cx), value)


def _as_binding(source: Union[Binding, StateHandle]) -> Binding:
    if isinstance(source, StateHandle):
        return StateBinding(source)
    return source


def setter(binding: Union[Binding, StateHandle]) -> Callable[[Any, Context], None]:
    """A function ``(value, cx)`` that writes through ``binding``."""
    target = _as_binding(binding)

    def write(value: Any, cx: Context) -> None:
        target.set(cx, value)

    return write


def bind(binding: Union[Binding, StateHandle], lens: Lens) -> MapBinding:
    """A binding to the part of ``binding``'s value focused by ``lens``."""
    return MapBinding(_as_binding(binding), lens)