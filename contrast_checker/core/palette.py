"""Named colour table and colour token normalisation.

A token is either one of the named colours below (any case, surrounding
whitespace ignored) or a 6-digit hex code with or without leading '#'.
Everything normalises to lowercase '#rrggbb'. 3-digit shorthand is not
accepted.
"""

import re
from types import MappingProxyType

from contrast_checker.core.types import Err, InvalidColor, Ok, Result

NAMED_COLORS = MappingProxyType(
    {
        'red': '#ff0000',
        'blue': '#0000ff',
        'green': '#008000',
        'black': '#000000',
        'white': '#ffffff',
        'gray': '#808080',
        'silver': '#c0c0c0',
        'lime': '#00ff00',
        'navy': '#000080',
        'maroon': '#800000',
        'purple': '#800080',
        'olive': '#808000',
        'teal': '#008080',
        'aqua': '#00ffff',
        'yellow': '#ffff00',
        'fuchsia': '#ff00ff',
        'orange': '#ffa500',
    }
)

HEX_PATTERN = re.compile(r'#[0-9a-f]{6}')


def normalize(token: str) -> Result[str]:
    """Normalise a colour token to '#rrggbb'.

    Returns Ok(hex) or Err(InvalidColor(token)).
    """
    val = token.strip().lower()

    # Named lookup must come before hex parsing
    named = NAMED_COLORS.get(val)
    if named is not None:
        return Ok(named)

    val = '#' + val.lstrip('#')
    if not HEX_PATTERN.fullmatch(val):
        return Err(InvalidColor(token))
    return Ok(val)


def is_valid_color(token: str) -> bool:
    """True if `token` normalises. Cheap enough to call on every keystroke."""
    return normalize(token).is_ok()


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Split a normalised '#rrggbb' into 8-bit channels."""
    return (int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16))


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'
