"""Relative luminance of sRGB colours as defined in WCAG 2.x.

Each 8-bit channel is scaled to [0, 1] and linearised:

    v <= 0.03928:  v / 12.92
    otherwise:     ((v + 0.055) / 1.055) ** 2.4

then weighted 0.2126 R + 0.7152 G + 0.0722 B.
"""

import numpy as np

from contrast_checker.core.palette import hex_to_rgb

LINEAR_BREAKPOINT = 0.03928
WEIGHTS = (0.2126, 0.7152, 0.0722)


def channel_to_linear(value: int) -> float:
    """Linearise one 8-bit sRGB channel."""
    v = value / 255
    if v <= LINEAR_BREAKPOINT:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """Relative luminance of a normalised '#rrggbb' colour, in [0, 1]."""
    r, g, b = hex_to_rgb(color)
    return WEIGHTS[0] * channel_to_linear(r) + WEIGHTS[1] * channel_to_linear(g) + WEIGHTS[2] * channel_to_linear(b)


def relative_luminance_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorised relative_luminance over an (..., 3) array of 8-bit channels."""
    v = np.asarray(rgb, dtype=float) / 255
    linear = np.where(v <= LINEAR_BREAKPOINT, v / 12.92, ((v + 0.055) / 1.055) ** 2.4)
    return WEIGHTS[0] * linear[..., 0] + WEIGHTS[1] * linear[..., 1] + WEIGHTS[2] * linear[..., 2]
