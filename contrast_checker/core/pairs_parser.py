"""Regex-based parser for colour-pair list files.

One pair per line:

    // comment
    body text: #333333 on white
    link: navy on #f8f9fa
    red on yellow

A label is optional; unlabelled pairs are named pair-<n>, and a repeated
label gets a -2, -3, ... suffix. Tokens are kept raw and are normalised
later, so an invalid colour still parses here and is reported by the
technique that evaluates it. Lines that do not match are skipped and
their line numbers recorded.
"""

import re

from contrast_checker.core.types import ColorPair, PairsFile

_PAIR_LINE = re.compile(r'^(?:(?P<label>[^:]+?)\s*:\s*)?(?P<fg>\S+)\s+on\s+(?P<bg>\S+)$', re.IGNORECASE)


def parse_pairs_file(path: str) -> PairsFile:
    """Parse a pairs file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return parse_pairs_string(text)


def parse_pairs_string(text: str) -> PairsFile:
    """Parse a pairs list from a string. Repeated labels get a -2, -3, ... suffix."""
    result = PairsFile(raw=text)
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith('//'):
            continue
        m = _PAIR_LINE.match(stripped)
        if not m:
            result.skipped.append(lineno)
            continue
        label = m.group('label') or f'pair-{len(result.pairs) + 1}'
        result.pairs.append(ColorPair(label=label, fg=m.group('fg'), bg=m.group('bg')))
    result.pairs = unique_labels(result.pairs)
    return result


def unique_name(name: str, used: set[str]) -> str:
    """Return `name`, or `name-2`, `name-3`, ... if taken, and mark it used."""
    candidate = name
    n = 2
    while candidate in used:
        candidate = f'{name}-{n}'
        n += 1
    used.add(candidate)
    return candidate


def unique_labels(pairs: list[ColorPair]) -> list[ColorPair]:
    """Relabel later pairs whose label is already taken; first occurrence keeps its label."""
    used: set[str] = set()
    return [ColorPair(label=unique_name(p.label, used), fg=p.fg, bg=p.bg) for p in pairs]


def pairs_from_tokens(tokens: list[str], start: int = 1) -> list[ColorPair]:
    """Group positional tokens into consecutive (fg, bg) pairs, numbered from `start`."""
    if len(tokens) % 2:
        raise ValueError(f'expected foreground/background pairs, got {len(tokens)} colour(s)')
    return [
        ColorPair(label=f'pair-{start + i // 2}', fg=tokens[i], bg=tokens[i + 1]) for i in range(0, len(tokens), 2)
    ]


def colors_from_pairs(pairs: list[ColorPair]) -> list[str]:
    """Distinct raw tokens of a pair list, in first-seen order."""
    seen: dict[str, None] = {}
    for pair in pairs:
        seen.setdefault(pair.fg, None)
        seen.setdefault(pair.bg, None)
    return list(seen)
