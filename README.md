# reactui

The core of a declarative, reactive user-interface toolkit. It holds the parts
that a rendering front end builds on:

- **Geometry** (`reactui.geometry`): `Point`, `Vector`, `Size`, `Rect` and
  `Transform`.
- **Alignment** (`reactui.align`): `align_h`, `align_v` and `align` return the
  offset that places a child rectangle inside a parent. The choices come from
  `HAlignment` (`LEADING`, `CENTER`, `TRAILING`) and `VAlignment` (`TOP`,
  `MIDDLE`, `BOTTOM`).
- **Regions** (`reactui.region`): `Region` collects non-empty rectangles, for
  example the parts of a window that need repainting.
- **Colours** (`reactui.colors`): `Color`, with `Color.hex(...)` and
  `Color.alpha(...)`, and a palette such as `TEXT_COLOR`, `RED_HIGHLIGHT`,
  `AZURE_HIGHLIGHT` and `BUTTON_BACKGROUND_COLOR`.
- **Paints** (`reactui.paint`): `SolidPaint` and `GradientPaint`, which
  register themselves with a painter object through its `color_paint` or
  `linear_gradient` method.
- **Events** (`reactui.event`): `TouchBegin`, `TouchMove`, `TouchEnd`,
  `CommandEvent`, `KeyEvent` and `AnimEvent`, plus `Key`, `Character`,
  `HotKey`, `MouseButton` and `KeyboardModifiers`.
- **View ids** (`reactui.viewid`): `ViewId` and the hashing helper `hh`.
- **State** (`reactui.context`): `Context` holds all UI state: view ids by
  path, layout boxes, user state reached through a `StateHandle`, and
  environment values keyed by type. `Context.update` runs animations and, when
  state has changed, drops unused state and layout and lays the view out
  again. `Context.process` delivers an event and returns the actions that no
  view handled. `Context.commands` lists the menu commands a view offers.
- **Lenses and bindings** (`reactui.lens`, `reactui.binding`): `make_lens`,
  `StateBinding`, `bind` and `setter` let a control read and write one field
  of a piece of state.
- **Views** (`reactui.view`): the `View` base class, with `DrawArgs` and
  `LayoutArgs`. A view implements `draw` and `layout`; the other hooks
  (`process`, `gc`, `access`, `commands`, `dirty`, `hittest`, `is_flexible`)
  visit the view's children by default.

## Installation

```
pip install .
```

## Example

```python
from dataclasses import dataclass

from reactui.align import HAlignment, VAlignment, align
from reactui.binding import bind
from reactui.context import Context, StateHandle
from reactui.geometry import Point, Rect, Size
from reactui.lens import make_lens
from reactui.viewid import ViewId

parent = Rect(Point(0.0, 0.0), Size(10.0, 10.0))
child = Rect(Point(0.0, 0.0), Size(1.0, 1.0))
off = align(child, parent, HAlignment.CENTER, VAlignment.MIDDLE)
assert (off.x, off.y) == (4.5, 4.5)


@dataclass
class MyState:
    x: int = 0


cx = Context()
vid = ViewId(1)
cx.init_state(vid, MyState)
b = bind(StateHandle(vid), make_lens("x"))
b.set(cx, 42)
assert b.get(cx) == 42
```

## What it does not do

The package draws nothing and opens no window. It has no event loop, no
built-in widgets (buttons, sliders, stacks, text) and no renderer: drawing goes
through whatever painter object is passed in `DrawArgs.vger`, and text sizes
come from the `text_bounds` function given to `Context.update`.

## Running the tests

```
pip install ".[test]"
pytest
```