"""The view protocol and the arguments passed to drawing and layout."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional, Sequence

from .geometry import Point, Rect, Size, Transform
from .viewid import IdPath, ViewId

if TYPE_CHECKING:
    from .context import CommandInfo, Context
    from .event import Event

TextBounds = Callable[[str, int, Optional[float]], Rect]


@dataclass
class DrawArgs:
    """What a view needs to draw itself."""

    cx: Context
    vger: Any


@dataclass
class LayoutArgs:
    """What a view needs to lay itself out: the available size and text measurement."""

    sz: Size
    cx: Context
    text_bounds: TextBounds

    def size(self, sz: Size) -> LayoutArgs:
        """The same arguments with a different available size."""
        return LayoutArgs(sz, self.cx, self.text_bounds)


class View(ABC):
    """The unit of UI composition.

    The default hooks visit the view's children, each under its index in
    ``path``. A leaf view has no children, so for it they do nothing.
    """

    def _children(self) -> Sequence[View]:
        return ()

    def _each_child(self, path: IdPath) -> Iterator[View]:
        for index, child in enumerate(self._children()):
            path.append(index)
            try:
                yield child
            finally:
                path.pop()

    def access(self, path: IdPath, cx: Context, nodes: list) -> Optional[int]:
        """Add accessibility nodes for this subtree; return its node id, if any."""
        found = None
        for child in self._each_child(path):
            node_id = child.access(path, cx, nodes)
            if found is None and node_id is not None:
                found = node_id
        return found

    def commands(self, path: IdPath, cx: Context, cmds: list[CommandInfo]) -> None:
        """Add menu commands offered by this subtree."""
        for child in self._each_child(path):
            child.commands(path, cx, cmds)

    def dirty(self, path: IdPath, xform: Transform, cx: Context) -> None:
        """Record regions that need repainting."""
        for child in self._each_child(path):
            child.dirty(path, xform, cx)

    @abstractmethod
    def draw(self, path: IdPath, args: DrawArgs) -> None:
        """Draw the view."""

    def gc(self, path: IdPath, cx: Context, keep: list[ViewId]) -> None:
        """Add the ids of views that hold layout or state and are still in use."""
        for child in self._each_child(path):
            child.gc(path, cx, keep)

    def hittest(self, path: IdPath, pt: Point, cx: Context) -> Optional[ViewId]:
        """The topmost view under ``pt``."""
        hit = None
        for child in self._each_child(path):
            child_hit = child.hittest(path, pt, cx)
            if child_hit is not None:
                hit = child_hit
        return hit

    def is_flexible(self) -> bool:
        """Whether the view expands within a stack."""
        return any(child.is_flexible() for child in self._children())

    @abstractmethod
    def layout(self, path: IdPath, args: LayoutArgs) -> Size:
        """Lay out subviews and return the size of the view."""

    def process(self, event: Event, path: IdPath, cx: Context, actions: list) -> None:
        """Handle an event, appending any actions produced."""
        for child in self._each_child(path):
            child.process(event, path, cx, actions)