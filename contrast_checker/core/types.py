"""Shared types for contrast-checker: results, compliance levels, Technique, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar('T')


class InvalidColor(Exception):
    """A token is neither a known colour name nor a 6-digit hex code.

    Carries only the offending token; rendering a message is up to the caller.
    """

    def __init__(self, token: str):
        super().__init__(token)
        self.token = token


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed result. `unwrap()` raises the wrapped InvalidColor."""

    error: InvalidColor

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


Result = Ok[T] | Err


class ComplianceLevel(str, Enum):
    """WCAG compliance tier for a contrast ratio."""

    AAA = 'AAA'
    AA = 'AA'
    FAIL = 'Fail'

    @property
    def rank(self) -> int:
        return _LEVEL_RANK[self]

    def meets(self, required: ComplianceLevel) -> bool:
        """True if this level is at least `required`."""
        return self.rank >= required.rank


_LEVEL_RANK = {ComplianceLevel.FAIL: 0, ComplianceLevel.AA: 1, ComplianceLevel.AAA: 2}


class TextSize(str, Enum):
    """WCAG text size category."""

    NORMAL = 'normal'
    LARGE = 'large'


@dataclass(frozen=True)
class Evaluation:
    """Contrast of one normalised foreground/background pair."""

    ratio: float
    level_normal: ComplianceLevel
    level_large: ComplianceLevel
    fg_normalized: str
    bg_normalized: str

    def level(self, size: TextSize) -> ComplianceLevel:
        if size is TextSize.LARGE:
            return self.level_large
        return self.level_normal

    def to_dict(self) -> dict[str, Any]:
        return {
            'fg': self.fg_normalized,
            'bg': self.bg_normalized,
            'ratio': round(self.ratio, 2),
            'level_normal': self.level_normal.value,
            'level_large': self.level_large.value,
        }


@dataclass
class ColorPair:
    """A labelled pair of raw colour tokens, as typed by the user."""

    label: str
    fg: str
    bg: str


@dataclass
class PairsFile:
    """Parsed colour-pair list."""

    pairs: list[ColorPair] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)  # 1-based line numbers
    raw: str = ''


class Technique:
    """A self-registering CLI technique.

    Usage in a technique module:

        technique = Technique(name='check', help='Evaluate colour pairs')

        @technique.arguments
        def add_arguments(parser):
            parser.add_argument(...)

        @technique.run
        def run(inputs, report, args):
            ...

    `inputs` is a list of ColorPair when `takes='pairs'` and a list of raw
    colour tokens when `takes='colors'`.
    """

    def __init__(self, name: str, help: str = '', takes: str = 'pairs'):
        if takes not in ('pairs', 'colors'):
            raise ValueError(f'Unknown input kind: {takes}')
        self.name = name
        self.help = help
        self.takes = takes
        self._run_fn: Callable | None = None
        self._arguments_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register extra subcommand arguments."""
        self._arguments_fn = fn
        return fn

    @property
    def runnable(self) -> bool:
        return self._run_fn is not None

    def add_arguments(self, parser: Any) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, inputs: list, report: Report, args: Any) -> None:
        """Execute the technique's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Technique {self.name} has no run function')
        self._run_fn(inputs, report, args)


@dataclass
class Report:
    """Accumulates results from techniques for text/JSON output."""

    title: str = ''
    source: str | None = None  # pairs file, if any
    entries: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0
    error_count: int = 0

    def add(self, label: str, technique_name: str, data: dict[str, Any]) -> None:
        """Add technique results for an entry."""
        if label not in self.entries:
            self.entries[label] = {'input': None, 'techniques': {}}
        self.entries[label]['techniques'][technique_name] = data

    def set_input(self, label: str, tokens: list[str]) -> None:
        """Record the raw tokens an entry was computed from."""
        if label not in self.entries:
            self.entries[label] = {'input': None, 'techniques': {}}
        self.entries[label]['input'] = list(tokens)

    def record_pass(self, label: str) -> None:
        self.pass_count += 1

    def record_fail(self, label: str) -> None:
        self.fail_count += 1

    def record_error(self, label: str) -> None:
        self.error_count += 1

    @property
    def failed(self) -> bool:
        return self.fail_count > 0 or self.error_count > 0
