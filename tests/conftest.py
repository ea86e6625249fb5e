"""Shared fixtures."""

from pathlib import Path

import pytest

SETTINGS_VARS = [
    'CONTRAST_CHECKER_OUT_DIR',
    'CONTRAST_CHECKER_FONT',
    'CONTRAST_CHECKER_SAMPLE_TEXT',
    'CONTRAST_CHECKER_DEFAULT_FG',
    'CONTRAST_CHECKER_DEFAULT_BG',
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Unset every CONTRAST_CHECKER_* setting for the test."""
    # setenv first so monkeypatch also undoes values written by load_env()
    for name in SETTINGS_VARS:
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def isolated_cwd(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> Path:
    """Run from an empty repo root so no stray .env is picked up."""
    (tmp_path / '.git').mkdir()
    clean_env.chdir(tmp_path)
    return tmp_path
