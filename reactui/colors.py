"""RGBA colors and the palette used by the built-in views."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})")


@dataclass(frozen=True)
class Color:
    """A color with red, green, blue and alpha channels in ``[0, 1]``."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @staticmethod
    def hex(text: str) -> Color:
        """Parse ``#RRGGBB`` or ``#RRGGBBAA``; the ``#`` is optional."""
        match = _HEX_RE.fullmatch(text)
        if match is None:
            raise ValueError(f"invalid hex color: {text!r}")
        digits = match.group(1)
        channels = [int(digits[i : i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
        return Color(*channels)

    def alpha(self, a: float) -> Color:
        """The same color with a different alpha."""
        return replace(self, a=a)


TEXT_COLOR = Color.hex("#D6D6D6")
RED_HIGHLIGHT = Color.hex("#FF0062")
RED_HIGHLIGHT_DARK = Color.hex("#A60040")
RED_HIGHLIGHT_BACKGROUND = Color.hex("#1C000B")
AZURE_HIGHLIGHT = Color.hex("#00D4FF")
AZURE_HIGHLIGHT_DARK = Color.hex("#009BBA")
AZURE_HIGHLIGHT_BACKGROUND = Color.hex("#000F14")
GREEN_HIGHLIGHT = Color.hex("#3BC455")

BUTTON_BACKGROUND_COLOR = Color(0.1, 0.1, 0.1, 1.0)
BUTTON_HOVER_COLOR = Color(0.2, 0.2, 0.2, 1.0)
CLEAR_COLOR = Color(0.0, 0.0, 0.0, 0.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)
CONTROL_BACKGROUND = Color(0.138, 0.138, 0.148, 1.0)
MEDIUM_GRAY = Color(0.533, 0.533, 0.533, 1.0)

GROOVES = Color.hex("#252A2B")
GROOVES_DARK = Color.hex("#0D0D0D")