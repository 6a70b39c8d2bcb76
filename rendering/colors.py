"""Colour helpers for the viewer."""

from typing import Tuple


def parse_hex_color(value: str) -> Tuple[float, float, float]:
    """'#rgb' or '#rrggbb' to an (r, g, b) tuple in 0-1."""
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        raise ValueError(f"Not a hex colour: {value!r}")
    return tuple(int(digits[k:k + 2], 16) / 255.0 for k in (0, 2, 4))
