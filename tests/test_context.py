import pytest

from reactui.context import CommandInfo, Context, LayoutBox, StateHandle
from reactui.event import AnimEvent, HotKey, TouchBegin
from reactui.geometry import Point, Rect, Size, Vector
from reactui.view import View
from reactui.viewid import ViewId


def _bounds(text, size, max_width):
    return Rect()


class Recorder(View):
    def __init__(self, keep=()):
        self.calls = []
        self.events = []
        self.keep = list(keep)

    def draw(self, path, args):
        self.calls.append("draw")

    def layout(self, path, args):
        self.calls.append(("layout", args.sz))
        return args.sz

    def process(self, event, path, cx, actions):
        self.events.append(event)
        actions.append(None)
        actions.append("act")

    def gc(self, path, cx, keep):
        self.calls.append("gc")
        keep.extend(self.keep)

    def access(self, path, cx, nodes):
        nodes.append(("node", 1))
        return None

    def dirty(self, path, xform, cx):
        self.calls.append("dirty")

    def commands(self, path, cx, cmds):
        cmds.append(CommandInfo("File:New", HotKey.KEY_N))


def test_view_id_allocation_is_stable():
    cx = Context()
    a = cx.view_id([0, 1])
    b = cx.view_id([0, 2])
    assert cx.view_id([0, 1]) == a
    assert b.id == a.id + 1


def test_layout_round_trip_and_default():
    cx = Context()
    assert cx.get_layout([0]) == LayoutBox()
    box = LayoutBox(Rect(Point(1.0, 2.0), Size(3.0, 4.0)), Vector(5.0, 6.0))
    cx.update_layout([0], box)
    assert cx.get_layout([0]) == box


def test_set_layout_offset():
    cx = Context()
    cx.set_layout_offset([0, 3], Vector(1.0, 1.0))
    assert cx.get_layout([0, 3]) == LayoutBox(Rect(), Vector(1.0, 1.0))
    rect = Rect(Point(0.0, 0.0), Size(2.0, 2.0))
    cx.update_layout([0, 3], LayoutBox(rect, Vector()))
    cx.set_layout_offset([0, 3], Vector(7.0, 8.0))
    assert cx.get_layout([0, 3]) == LayoutBox(rect, Vector(7.0, 8.0))


def test_state_dirty_tracking():
    cx = Context()
    h = StateHandle(ViewId(5))
    cx.init_state(h.id, lambda: [1])
    assert cx[h] == [1]
    assert not cx.dirty and not cx.is_dirty(h.id)
    cx.get_mut(h).append(2)
    assert cx[h] == [1, 2]
    assert cx.dirty and cx.is_dirty(h.id)
    cx.clear_dirty()
    assert not cx.dirty and not cx.is_dirty(h.id)


def test_setitem_and_disabled_dirty():
    cx = Context()
    h = StateHandle(ViewId(2))
    cx.set_state(h.id, 3)
    cx.enable_dirty = False
    cx[h] = 4
    assert cx[h] == 4
    assert cx.dirty is False
    assert cx.is_dirty(h.id) is True


def test_init_state_does_not_overwrite():
    cx = Context()
    cx.init_state(ViewId(1), lambda: "first")
    cx.init_state(ViewId(1), lambda: "second")
    assert cx.get(StateHandle(ViewId(1))) == "first"


def test_missing_state_raises():
    with pytest.raises(KeyError):
        Context().get(StateHandle(ViewId(9)))


def test_env():
    cx = Context()
    assert cx.init_env(int, lambda: 3) == 3
    assert cx.init_env(int, lambda: 4) == 3
    assert cx.set_env(10) == 3
    assert cx.set_env("a") is None
    assert cx.init_env(int, lambda: 0) == 10


def test_update_without_changes_only_animates():
    cx = Context()
    v = Recorder()
    assert cx.update(v, Size(10.0, 10.0), _bounds) is False
    assert v.events == [AnimEvent()]
    assert v.calls == []


def test_update_when_dirty_collects_and_lays_out():
    cx = Context()
    kept = ViewId(100)
    dropped = ViewId(200)
    cx.set_state(kept, "k")
    cx.set_state(dropped, "d")
    cx.dirty = True
    nodes = []
    v = Recorder(keep=[kept])
    assert cx.update(v, Size(8.0, 6.0), _bounds, nodes) is True
    assert set(cx.state_map) == {kept}
    assert v.calls == ["gc", ("layout", Size(8.0, 6.0)), "dirty"]
    assert nodes == [("node", 1)]
    assert cx.access_nodes == nodes
    assert cx.dirty is False


def test_update_drops_layout_of_unused_views():
    cx = Context()
    cx.update_layout([0], LayoutBox(offset=Vector(1.0, 0.0)))
    cx.update_layout([0, 1], LayoutBox(offset=Vector(2.0, 0.0)))
    cx.dirty = True
    cx.update(Recorder(keep=[cx.view_id([0])]), Size(1.0, 1.0), _bounds)
    assert cx.get_layout([0]) == LayoutBox(offset=Vector(1.0, 0.0))
    assert cx.get_layout([0, 1]) == LayoutBox()


def test_window_resize_clears_deps():
    cx = Context()
    cx.deps[ViewId(1)] = [ViewId(2)]
    cx.update(Recorder(), Size(), _bounds)
    assert cx.deps
    cx.update(Recorder(), Size(4.0, 4.0), _bounds)
    assert cx.deps == {}
    assert cx.window_size == Size(4.0, 4.0)


def test_process_offsets_event_and_returns_unhandled():
    cx = Context()
    cx.root_offset = Vector(2.0, 3.0)
    v = Recorder()
    unhandled = cx.process(v, TouchBegin(0, Point(5.0, 5.0)))
    assert v.events == [TouchBegin(0, Point(3.0, 2.0))]
    assert unhandled == ["act"]


def test_commands():
    assert Context().commands(Recorder()) == [CommandInfo("File:New", HotKey.KEY_N)]