from __future__ import annotations
import math
from typing import Sequence, Tuple

from ..core.types import RGB

# With the default palette APR..OCT get dark text and MAR stays light.
CONTRAST_THRESHOLD = 0.27


def rgb_to_hex(colour: Sequence[int]) -> str:
    r, g, b = colour
    return f"#{r:02x}{g:02x}{b:02x}"

def rgb_to_rgb_string(colour: Sequence[int]) -> str:
    r, g, b = colour
    return f"rgb({r}, {g}, {b})"

def colour_sum(colour1: Sequence[int], colour2: Sequence[int], steps: int, this_step: int) -> RGB:
    """Colour ``this_step`` of ``steps`` on the straight line from colour1 to colour2."""
    out = []
    for c1, c2 in zip(colour1, colour2):
        diff = (max(c1, c2) - min(c1, c2)) / steps
        inc = diff * this_step if c1 < c2 else -diff * this_step
        # halves round up
        out.append(_round_half_up(c1 + inc))
    return tuple(out)  # type: ignore[return-value]

def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)

def _linearize(component: int) -> float:
    c = component / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

def relative_luminance(colour: Sequence[int]) -> float:
    """WCAG 2.x relative luminance in [0, 1]."""
    r, g, b = (_linearize(c) for c in colour)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b

def contrast_colour(colour: Sequence[int]) -> str:
    """'#000' on light backgrounds, '#fff' on dark ones."""
    return "#000" if relative_luminance(colour) > CONTRAST_THRESHOLD else "#fff"

def label_styles(colours: Sequence[Sequence[int]]) -> Tuple[str, ...]:
    return tuple(contrast_colour(c) for c in colours)
