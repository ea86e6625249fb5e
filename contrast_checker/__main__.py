"""contrast-checker — WCAG 2.x contrast ratios and AA/AAA compliance for colour pairs.

Usage: contrast-checker <technique> [colors ...] [options]

Colours are named colours (red, navy, ...) or 6-digit hex codes with or
without '#'. Pair techniques read positional colours as fg/bg pairs, or
a pairs file given with --pairs.

Techniques are auto-discovered from contrast_checker/techniques/.
Each technique module's docstring is its documentation.
Run `contrast-checker help <technique>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, contrast-checker looks for a .env file starting
  from the current directory and walking up, stopping at the nearest .git
  boundary. Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import os
import sys

from contrast_checker import registry
from contrast_checker.core.env import load_env
from contrast_checker.core.pairs_parser import colors_from_pairs, pairs_from_tokens, parse_pairs_file, unique_labels
from contrast_checker.core.report import format_json, format_text
from contrast_checker.core.types import ColorPair, ComplianceLevel, Report, Technique, TextSize


def _load_technique_module(name: str) -> object:
    """Load the raw module for a technique (for docstring access)."""
    return importlib.import_module(f'contrast_checker.techniques.{name}')


def _short_doc(name: str, tech: Technique) -> str:
    doc = (_load_technique_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else tech.help


def _build_parser() -> argparse.ArgumentParser:
    techniques = registry.all_techniques()

    epilog = (
        'Examples:\n'
        '  contrast-checker check red white\n'
        "  contrast-checker check '#333333' '#f8f9fa' --require AA\n"
        '  contrast-checker check --pairs palette.txt --require AAA --size large --json\n'
        "  contrast-checker normalize Red ' #FFAA00 '\n"
        '  contrast-checker luminance navy yellow\n'
        '  contrast-checker grid white black navy yellow\n'
        '  contrast-checker preview red white --out-dir ./tmp\n'
        '  contrast-checker help check\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  CONTRAST_CHECKER_OUT_DIR, CONTRAST_CHECKER_FONT, CONTRAST_CHECKER_SAMPLE_TEXT\n'
        '  CONTRAST_CHECKER_DEFAULT_FG, CONTRAST_CHECKER_DEFAULT_BG\n'
    )
    parser = argparse.ArgumentParser(
        prog='contrast-checker',
        description='WCAG 2.x contrast ratios and AA/AAA compliance for colour pairs.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='technique', help='Technique to run')

    for name, tech in sorted(techniques.items()):
        p = sub.add_parser(name, help=_short_doc(name, tech))
        if tech.takes == 'pairs':
            p.add_argument(
                'colors', nargs='*', metavar='COLOR', help='Colours, read as consecutive foreground/background pairs'
            )
        else:
            p.add_argument('colors', nargs='*', metavar='COLOR', help='Colour names or hex codes')
        p.add_argument('-f', '--pairs', metavar='FILE', help='Read colour pairs from FILE ("[label:] fg on bg" lines)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '-r',
            '--require',
            type=ComplianceLevel,
            choices=[ComplianceLevel.AA, ComplianceLevel.AAA],
            metavar='{AA,AAA}',
            default=None,
            help='Record pass/fail against this level; exit 1 if anything fails (CI gating)',
        )
        p.add_argument(
            '-s',
            '--size',
            type=TextSize,
            choices=list(TextSize),
            metavar='{normal,large}',
            default=TextSize.NORMAL,
            help='Text size the --require level applies to (default: normal)',
        )
        tech.add_arguments(p)

    help_parser = sub.add_parser('help', help='Print full docs for a technique')
    help_parser.add_argument('command', nargs='?', help='Technique name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a technique."""
    techniques = registry.all_techniques()

    if command is None:
        print('Available techniques:\n')
        for name, tech in sorted(techniques.items()):
            print(f'  {name:<12} {_short_doc(name, tech)}')
        print('\nRun: contrast-checker help <technique> for full docs.')
        return

    if command not in techniques:
        print(f'Unknown technique: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(techniques))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_technique_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _load_pairs(args: argparse.Namespace) -> list[ColorPair]:
    """Load pairs from --pairs file, or group positional colours into pairs."""
    pairs: list[ColorPair] = []
    if args.pairs:
        parsed = parse_pairs_file(args.pairs)
        if parsed.skipped:
            skipped = ', '.join(str(n) for n in parsed.skipped)
            print(f'contrast-checker: {args.pairs}: skipped unparseable line(s) {skipped}', file=sys.stderr)
        pairs.extend(parsed.pairs)
    pairs.extend(pairs_from_tokens(args.colors, start=len(pairs) + 1))
    return unique_labels(pairs)


def _load_inputs(tech: Technique, args: argparse.Namespace) -> list:
    if tech.takes == 'colors':
        colors = colors_from_pairs(parse_pairs_file(args.pairs).pairs) if args.pairs else []
        return list(dict.fromkeys(colors + args.colors))
    return _load_pairs(args)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'contrast-checker: loaded {env_path}', file=sys.stderr)

    if not args.technique:
        parser.print_help()
        sys.exit(1)

    if args.technique == 'help':
        _print_help(getattr(args, 'command', None))
        return

    if args.pairs and not os.path.isfile(args.pairs):
        print(f'Error: pairs file not found: {args.pairs}', file=sys.stderr)
        sys.exit(1)

    tech = registry.get(args.technique)
    try:
        inputs = _load_inputs(tech, args)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if not inputs:
        print('Error: no colours given', file=sys.stderr)
        sys.exit(1)

    report = Report(title=args.technique, source=args.pairs)
    if tech.takes == 'pairs':
        for pair in inputs:
            report.set_input(pair.label, [pair.fg, pair.bg])

    tech.execute(inputs, report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate, after output so the report is visible even on failure
    if report.failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
