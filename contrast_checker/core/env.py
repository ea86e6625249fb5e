"""Environment configuration for contrast-checker.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  CONTRAST_CHECKER_OUT_DIR       preview output directory (default: contrast-previews)
  CONTRAST_CHECKER_FONT          TrueType font for previews (default: Pillow's built-in font)
  CONTRAST_CHECKER_SAMPLE_TEXT   preview sample sentence
  CONTRAST_CHECKER_DEFAULT_FG    fallback preview foreground (default: #ffffff)
  CONTRAST_CHECKER_DEFAULT_BG    fallback preview background (default: #000000)
"""

import os
from dataclasses import dataclass
from pathlib import Path

from contrast_checker.core.palette import normalize

ENV_PREFIX = 'CONTRAST_CHECKER_'

DEFAULT_FG = '#ffffff'
DEFAULT_BG = '#000000'
DEFAULT_SAMPLE_TEXT = 'The quick brown fox jumps over the lazy dog.'
DEFAULT_OUT_DIR = 'contrast-previews'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are dropped, # lines ignored."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _env(name: str) -> str | None:
    value = os.environ.get(ENV_PREFIX + name)
    return value if value else None


def _color_or_default(name: str, default: str) -> str:
    raw = _env(name)
    if raw is None:
        return default
    result = normalize(raw)
    return result.value if result.is_ok() else default


@dataclass(frozen=True)
class Settings:
    out_dir: str = DEFAULT_OUT_DIR
    font_path: str | None = None
    sample_text: str = DEFAULT_SAMPLE_TEXT
    default_fg: str = DEFAULT_FG
    default_bg: str = DEFAULT_BG

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            out_dir=_env('OUT_DIR') or DEFAULT_OUT_DIR,
            font_path=_env('FONT'),
            sample_text=_env('SAMPLE_TEXT') or DEFAULT_SAMPLE_TEXT,
            default_fg=_color_or_default('DEFAULT_FG', DEFAULT_FG),
            default_bg=_color_or_default('DEFAULT_BG', DEFAULT_BG),
        )
