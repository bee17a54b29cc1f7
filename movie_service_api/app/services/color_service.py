"""
Random color generation for the landing page.

Colors are produced in HSL space with fixed saturation and lightness
and a random hue, then converted to a ``#rrggbb`` hex string.  Each
call to ``create_hex`` steps the hue by the golden ratio conjugate so
consecutive colors from one generator are spread around the wheel.
"""

import math
import random
from typing import Optional, Tuple

GOLDEN_RATIO_CONJUGATE = 0.618033988749895


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """Convert an HSL triple (each in ``[0, 1]``) to 8-bit RGB."""
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(math.fmod(h * 6, 2) - 1))
    m = l - c / 2

    if h < 1 / 6:
        r1, g1, b1 = c, x, 0.0
    elif h < 2 / 6:
        r1, g1, b1 = x, c, 0.0
    elif h < 3 / 6:
        r1, g1, b1 = 0.0, c, x
    elif h < 4 / 6:
        r1, g1, b1 = 0.0, x, c
    elif h < 5 / 6:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    return (
        _to_byte(r1 + m),
        _to_byte(g1 + m),
        _to_byte(b1 + m),
    )


def _to_byte(value: float) -> int:
    return max(0, min(255, int(value * 255)))


class ColorGenerator:
    """Generate hex colors with a fixed saturation and lightness."""

    def __init__(self, hue: Optional[float] = None, saturation: float = 0.5, lightness: float = 0.5) -> None:
        self.hue = random.random() if hue is None else hue
        self.saturation = saturation
        self.lightness = lightness

    def create_hex(self) -> str:
        """Advance the hue and return the resulting color as ``#rrggbb``."""
        self.hue = math.fmod(self.hue + GOLDEN_RATIO_CONJUGATE, 1.0)
        r, g, b = hsl_to_rgb(self.hue, self.saturation, self.lightness)
        return f"#{r:02x}{g:02x}{b:02x}"


def random_color() -> str:
    """Return one random color for a single page render."""
    return ColorGenerator(saturation=0.5, lightness=0.5).create_hex()
