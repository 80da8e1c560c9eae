"""The context that holds all UI state: layout, view ids, user state and environment."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Optional, TypeVar

from .event import Event, HotKey, KeyboardModifiers, AnimEvent, MouseButton
from .geometry import Point, Rect, Size, Transform, Vector
from .region import Region
from .view import LayoutArgs, TextBounds, View
from .viewid import IdPath, ViewId

logger = logging.getLogger(__name__)

S = TypeVar("S")

DEBUG_LAYOUT = False
MAX_TOUCHES = 16


@dataclass(frozen=True)
class CommandInfo:
    """A menu command: its path, such as ``"File:New"``, and an optional hot key."""

    path: str
    key: Optional[HotKey] = None


@dataclass(frozen=True)
class LayoutBox:
    """The laid-out rectangle of a view and its offset within its parent."""

    rect: Rect = field(default_factory=Rect)
    offset: Vector = field(default_factory=Vector)


@dataclass
class StateHolder:
    """User state and whether it changed since the last update."""

    state: Any
    dirty: bool = False


@dataclass(frozen=True)
class StateHandle(Generic[S]):
    """Refers to a piece of state stored in a :class:`Context`."""

    id: ViewId


class Context:
    """Stores all UI state."""

    def __init__(self) -> None:
        self._layout: dict[tuple[int, ...], LayoutBox] = {}
        self._view_ids: dict[tuple[int, ...], ViewId] = {}
        self._next_id = 0
        self.touches: list[ViewId] = [ViewId()] * MAX_TOUCHES
        self.starts: list[Point] = [Point()] * MAX_TOUCHES
        self.previous_position: list[Point] = [Point()] * MAX_TOUCHES
        self.mouse_button: Optional[MouseButton] = None
        self.key_mods = KeyboardModifiers()
        self.focused_id: Optional[ViewId] = None
        self.window_title = "reactui"
        self.fullscreen = False
        self.state_map: dict[ViewId, StateHolder] = {}
        self.dirty = False
        self.enable_dirty = True
        self.env: dict[type, Any] = {}
        self.dirty_region = Region()
        self.deps: dict[ViewId, list[ViewId]] = {}
        self.id_stack: list[ViewId] = []
        self.window_size = Size()
        self.root_offset = Vector()
        self.render_dirty = False
        self.access_nodes: list = []
        self.grab_cursor = False
        self.prev_grab_cursor = False

    def update(
        self,
        view: View,
        window_size: Size,
        text_bounds: TextBounds,
        access_nodes: Optional[list] = None,
    ) -> bool:
        """Run animations and, if state changed, collect garbage and relayout.

        Returns whether anything was updated. The accessibility nodes are kept in
        ``self.access_nodes``; a list passed as ``access_nodes`` is refreshed too.
        """
        if window_size != self.window_size:
            self.deps.clear()
            self.window_size = window_size

        path = [0]
        view.process(AnimEvent(), path, self, [])
        assert len(path) == 1

        if not self.dirty:
            return False

        keep: list[ViewId] = []
        view.gc(path, self, keep)
        assert len(path) == 1
        keep_set = set(keep)
        self.state_map = {k: v for k, v in self.state_map.items() if k in keep_set}
        self._layout = {
            k: v for k, v in self._layout.items() if self.view_id(list(k)) in keep_set
        }

        nodes: list = []
        view.access(path, self, nodes)
        assert len(path) == 1
        previous = self.access_nodes if access_nodes is None else access_nodes
        if nodes != previous:
            logger.debug("access nodes: %r", nodes)
            if access_nodes is not None:
                access_nodes[:] = nodes
        self.access_nodes = nodes

        view.layout(
            path,
            LayoutArgs(Size(window_size.width, window_size.height), self, text_bounds),
        )
        assert len(path) == 1

        view.dirty(path, Transform.identity(), self)
        self.clear_dirty()
        return True

    def process(self, view: View, event: Event) -> list:
        """Deliver ``event`` to ``view``; return the actions nobody handled."""
        actions: list = []
        view.process(event.offset(-self.root_offset), [0], self, actions)
        unhandled = [a for a in actions if a is not None]
        for action in unhandled:
            logger.debug("unhandled action: %r", type(action))
        return unhandled

    def commands(self, view: View) -> list[CommandInfo]:
        """The menu commands offered by ``view``."""
        cmds: list[CommandInfo] = []
        view.commands([0], self, cmds)
        return cmds

    def view_id(self, path: IdPath) -> ViewId:
        """The id for ``path``, allocating a new one the first time."""
        key = tuple(path)
        found = self._view_ids.get(key)
        if found is None:
            found = ViewId(self._next_id)
            self._view_ids[key] = found
            self._next_id += 1
        return found

    def get_layout(self, path: IdPath) -> LayoutBox:
        return self._layout.get(tuple(path), LayoutBox())

    def update_layout(self, path: IdPath, layout_box: LayoutBox) -> None:
        self._layout[tuple(path)] = layout_box

    def set_layout_offset(self, path: IdPath, offset: Vector) -> None:
        key = tuple(path)
        self._layout[key] = replace(self._layout.get(key, LayoutBox()), offset=offset)

    def set_dirty(self) -> None:
        if self.enable_dirty:
            self.dirty = True

    def clear_dirty(self) -> None:
        self.dirty = False
        for holder in self.state_map.values():
            holder.dirty = False

    def set_state(self, id: ViewId, value: Any) -> None:
        self.state_map[id] = StateHolder(value)

    def is_dirty(self, id: ViewId) -> bool:
        return self.state_map[id].dirty

    def init_state(self, id: ViewId, func: Callable[[], Any]) -> None:
        """Create the state for ``id`` with ``func`` unless it already exists."""
        if id not in self.state_map:
            self.state_map[id] = StateHolder(func())

    def init_env(self, kind: type, func: Callable[[], Any]) -> Any:
        """A copy of the environment value of type ``kind``, created by ``func`` if absent."""
        if kind not in self.env:
            self.env[kind] = func()
        return copy.copy(self.env[kind])

    def set_env(self, value: Any) -> Any:
        """Set the environment value of ``value``'s type; return the previous one or None."""
        kind = type(value)
        old = self.env.get(kind)
        self.env[kind] = copy.copy(value)
        return old

    def get(self, handle: StateHandle[S]) -> S:
        return self.state_map[handle.id].state

    def get_mut(self, handle: StateHandle[S]) -> S:
        """The state for ``handle``, marked as changed."""
        self.set_dirty()
        holder = self.state_map[handle.id]
        holder.dirty = True
        return holder.state

    def __getitem__(self, handle: StateHandle[S]) -> S:
        return self.get(handle)

    def __setitem__(self, handle: StateHandle[S], value: S) -> None:
        self.set_dirty()
        holder = self.state_map[handle.id]
        holder.dirty = True
        holder.state = value