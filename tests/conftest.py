"""Shared fixtures for the Caesar cipher tests."""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "scripts"))

from alphabet import Alphabet

LOWER_SPACE = "abcdefghijklmnopqrstuvwxyz "

# Plain prose used by the recovery tests. Spaces are roughly 21% of each
# text; no letter reaches 11%.
PLAINTEXT = (
    "the quick brown fox jumps over the lazy dog and then it runs far away "
    "into the woods where the old owl sleeps in a tall tree. "
)
REFERENCE_TEXT = (
    "it was a bright cold day in april and the clocks were striking thirteen "
    "so we went out to walk along the river and talk about the weather "
)


@pytest.fixture
def repo_root():
    """Return the real repo root path."""
    return ROOT


@pytest.fixture
def abc():
    """Lowercase latin letters plus space (27 symbols)."""
    return Alphabet(LOWER_SPACE)


def write_config(directory, alphabet=LOWER_SPACE, shift=5, extra=""):
    """Helper: write a caesar.cfg into directory and return its path."""
    path = Path(directory) / "caesar.cfg"
    text = f"# test settings\nalphabet = [{alphabet}]\nshift = {shift}\n{extra}"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Temp working directory holding a caesar.cfg with shift 5."""
    write_config(tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CAESAR_CONFIG", raising=False)
    monkeypatch.delenv("CAESAR_FREQ", raising=False)
    return tmp_path
