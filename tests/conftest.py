"""
Shared fixtures for the extruded text GIF tests.
"""

import pytest

from extruded_text_gif.config import FONT_ENV_KEYS
from extruded_text_gif.fonts import load_font


@pytest.fixture(autouse=True)
def clean_font_env(monkeypatch):
    """Keep a developer's font overrides out of the tests."""
    for key in FONT_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def font():
    return load_font()


@pytest.fixture
def output_dir(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    return out
