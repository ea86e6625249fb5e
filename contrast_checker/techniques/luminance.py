"""Relative luminance (WCAG 2.x) of each colour token.

Reports the normalised hex code, its 8-bit RGB channels and the relative
luminance in [0, 1].

Example:
    contrast-checker luminance white navy '#7b9e8b'
"""

from contrast_checker.core.luminance import relative_luminance
from contrast_checker.core.palette import hex_to_rgb, normalize
from contrast_checker.core.types import Err, Report, Technique

technique = Technique(
    name='luminance',
    help='Relative luminance of each colour.',
    takes='colors',
)


@technique.run
def run(colors: list[str], report: Report, args) -> None:
    for token in colors:
        result = normalize(token)
        if isinstance(result, Err):
            report.add(token, 'luminance', {'error': 'invalid color', 'token': token})
            report.record_error(token)
            continue
        color = result.value
        report.add(
            token,
            'luminance',
            {
                'hex': color,
                'rgb': list(hex_to_rgb(color)),
                'luminance': round(relative_luminance(color), 6),
            },
        )
