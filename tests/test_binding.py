from dataclasses import dataclass

import pytest

from reactui.binding import Binding, MapBinding, StateBinding, bind, setter
from reactui.context import Context, StateHandle
from reactui.lens import make_lens
from reactui.viewid import ViewId


@dataclass
class MyState:
    x: int = 0


def _cx_with_state():
    cx = Context()
    id = ViewId()
    cx.init_state(id, MyState)
    return cx, StateHandle(id)


def test_bind():
    cx, s = _cx_with_state()
    b = bind(s, make_lens("x"))
    b.set(cx, 42)
    assert b.get(cx) == 42


def test_bind_wraps_handle():
    _, s = _cx_with_state()
    assert bind(s, make_lens("x")) == MapBinding(StateBinding(s), make_lens("x"))


def test_set_through_lens_marks_dirty():
    cx, s = _cx_with_state()
    b = bind(s, make_lens("x"))
    b.set(cx, 42)
    assert cx.dirty and cx.is_dirty(s.id)
    assert cx[s] == MyState(42)


def test_state_binding_round_trip():
    cx = Context()
    h = StateHandle(ViewId(3))
    cx.set_state(h.id, "a")
    b = StateBinding(h)
    b.set(cx, "b")
    assert b.get(cx) == "b"
    assert cx[h] == "b"


def test_with_and_with_mut():
    cx = Context()
    h = StateHandle(ViewId(4))
    cx.set_state(h.id, [1, 2])
    b = StateBinding(h)
    assert b.with_(cx, len) == 2
    assert cx.dirty is False
    b.with_mut(cx, lambda items: items.append(3))
    assert cx[h] == [1, 2, 3]
    assert cx.dirty is True


def test_setter():
    cx, s = _cx_with_state()
    write = setter(bind(s, make_lens("x")))
    write(42, cx)
    assert cx[s].x == 42


def test_setter_on_handle():
    cx, s = _cx_with_state()
    setter(s)(MyState(42), cx)
    assert cx[s] == MyState(42)


def test_binding_is_abstract():
    with pytest.raises(TypeError):
        Binding()