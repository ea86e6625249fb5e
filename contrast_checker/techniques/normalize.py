"""Normalise colour tokens to canonical lowercase #rrggbb.

Accepts the named colours (red, blue, green, black, white, gray, silver,
lime, navy, maroon, purple, olive, teal, aqua, yellow, fuchsia, orange)
in any case, or 6-digit hex with or without '#'. 3-digit shorthand is
rejected.

Example:
    contrast-checker normalize Red ' #FFAA00 ' abc123 '#fff'
"""

from contrast_checker.core.palette import normalize
from contrast_checker.core.types import Err, Report, Technique

technique = Technique(
    name='normalize',
    help='Normalise colour names and hex codes to #rrggbb.',
    takes='colors',
)


@technique.run
def run(colors: list[str], report: Report, args) -> None:
    for token in colors:
        result = normalize(token)
        if isinstance(result, Err):
            report.add(token, 'normalize', {'error': 'invalid color', 'token': token})
            report.record_error(token)
        else:
            report.add(token, 'normalize', {'normalized': result.value})
