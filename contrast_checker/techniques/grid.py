"""Pairwise contrast grid for a set of colours.

Computes the contrast ratio of every colour against every other colour
(vectorised with numpy) and the compliance level for the text size
chosen with --size. The grid is symmetric, so each entry lists the
colour as foreground on every other colour.

With --require AA|AAA each ordered pair is recorded as pass/fail.
Invalid colours are reported and left out of the grid.

Example:
    contrast-checker grid white black navy yellow '#7b9e8b'
    contrast-checker grid --pairs palette.txt --require AA --json
"""

from contrast_checker.core.contrast import compliance, contrast_matrix
from contrast_checker.core.palette import normalize
from contrast_checker.core.types import Err, Report, Technique
from contrast_checker.techniques.check import requirement

technique = Technique(
    name='grid',
    help='Contrast ratio of every colour against every other colour.',
    takes='colors',
)


@technique.run
def run(colors: list[str], report: Report, args) -> None:
    required, size = requirement(args)

    tokens: list[str] = []
    normalized: list[str] = []
    for token in colors:
        result = normalize(token)
        if isinstance(result, Err):
            report.add(token, 'grid', {'error': 'invalid color', 'token': token})
            report.record_error(token)
            continue
        tokens.append(token)
        normalized.append(result.value)

    ratios = contrast_matrix(normalized)
    for i, token in enumerate(tokens):
        against = {}
        for j, other in enumerate(tokens):
            if i == j:
                continue
            ratio = float(ratios[i, j])
            level = compliance(ratio, size)
            cell = {'bg': normalized[j], 'ratio': round(ratio, 2), 'level': level.value}
            if required is not None:
                cell['pass'] = level.meets(required)
                if cell['pass']:
                    report.record_pass(token)
                else:
                    report.record_fail(token)
            against[other] = cell
        report.add(token, 'grid', {'hex': normalized[i], 'size': size.value, 'against': against})
