"""Evaluate foreground/background pairs against WCAG contrast thresholds.

For each pair: normalises both tokens, computes the contrast ratio and
the compliance level for normal and large text.

    normal text   AAA >= 7.0   AA >= 4.5
    large text    AAA >= 4.5   AA >= 3.0

With --require AA|AAA each pair is recorded as pass/fail for the text
size chosen with --size (default normal), and the exit status is 1 if
any pair fails. An invalid colour is reported per pair and also makes
the exit status 1.

Example:
    contrast-checker check red white
    contrast-checker check '#333333' '#f8f9fa' navy yellow --require AA
    contrast-checker check --pairs palette.txt --require AAA --size large --json
"""

from contrast_checker.core.contrast import evaluate
from contrast_checker.core.types import ColorPair, ComplianceLevel, Err, Report, Technique, TextSize

technique = Technique(
    name='check',
    help='Contrast ratio and AA/AAA level for each foreground/background pair.',
)


def requirement(args) -> tuple[ComplianceLevel | None, TextSize]:
    """Resolve --require/--size from parsed args (or any object with those attributes)."""
    required = getattr(args, 'require', None)
    size = getattr(args, 'size', None) or TextSize.NORMAL
    return (ComplianceLevel(required) if required else None), TextSize(size)


@technique.run
def run(pairs: list[ColorPair], report: Report, args) -> None:
    required, size = requirement(args)
    for pair in pairs:
        result = evaluate(pair.fg, pair.bg)
        if isinstance(result, Err):
            report.add(pair.label, 'check', {'error': 'invalid color', 'token': result.error.token})
            report.record_error(pair.label)
            continue

        evaluation = result.value
        data = evaluation.to_dict()
        if required is not None:
            passed = evaluation.level(size).meets(required)
            data['required'] = required.value
            data['size'] = size.value
            data['pass'] = passed
            if passed:
                report.record_pass(pair.label)
            else:
                report.record_fail(pair.label)
        report.add(pair.label, 'check', data)
