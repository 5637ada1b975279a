#!/usr/bin/env python3
"""Centralized file I/O for the Caesar tools.

Reads the `key = value` configuration file and reads/writes frequency
tables. Everything that touches caesar.cfg or freq.txt goes through here.

Usage:
    from caesar_io import load_config, save_frequency_table, load_frequency_table

    config = load_config("caesar.cfg")
    table = load_frequency_table("freq.txt", config.alphabet)

    # CLI check of a config file
    python scripts/caesar_io.py caesar.cfg
"""
import re
import sys
from pathlib import Path
from typing import List, NamedTuple

sys.path.insert(0, str(Path(__file__).resolve().parent))
from alphabet import Alphabet, parse_alphabet
from cipher import open_text
from cracker import SAMPLE_SIZE

CONFIG_NAME = "caesar.cfg"
FREQ_NAME = "freq.txt"


class ConfigError(ValueError):
    """Configuration is readable but unusable."""


class CaesarConfig(NamedTuple):
    alphabet: Alphabet
    shift: int = 0
    sample_size: int = SAMPLE_SIZE

    def with_shift(self, shift: int) -> "CaesarConfig":
        """Copy with a different shift, normalized to the alphabet."""
        return self._replace(shift=shift % len(self.alphabet))


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

def parse_pairs(text: str) -> dict:
    """Split config text into a {key: value} dict.

    Only CR, LF and CRLF end a line; form feeds and Unicode line
    separators inside an alphabet literal are kept. Blank lines and `#`
    comments are ignored, as are lines with no `=` or with nothing before
    it. Later keys override earlier ones.
    """
    pairs = {}
    for line in re.split(r"\r\n|\r|\n", text):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        pos = line.find("=")
        if pos <= 0:
            continue
        pairs[line[:pos].strip()] = line[pos + 1:].strip()
    return pairs


def parse_config(text: str) -> CaesarConfig:
    """Build a CaesarConfig from configuration text."""
    pairs = parse_pairs(text)

    alphabet = parse_alphabet(pairs.get("alphabet"))
    if alphabet is None:
        raise ConfigError("configuration has no alphabet")

    try:
        shift = int(pairs.get("shift", "0"))
    except ValueError:
        raise ValueError(f"shift is not an integer: {pairs['shift']!r}") from None

    sample_size = SAMPLE_SIZE
    if "sample_size" in pairs:
        try:
            sample_size = int(pairs["sample_size"])
        except ValueError:
            raise ValueError(f"sample_size is not an integer: {pairs['sample_size']!r}") from None
        if sample_size <= 0:
            raise ConfigError(f"sample_size must be positive, got {sample_size}")

    return CaesarConfig(alphabet, shift % len(alphabet), sample_size)


def load_config(path=CONFIG_NAME) -> CaesarConfig:
    """Load caesar.cfg. A missing file raises FileNotFoundError."""
    with open_text(path) as f:
        return parse_config(f.read())


# ---------------------------------------------------------------------------
# Frequency tables
# ---------------------------------------------------------------------------

def save_frequency_table(path, table: List[int], alphabet: Alphabet) -> None:
    """Write one `<symbol>=<value>` line per alphabet symbol."""
    with open_text(path, "w") as f:
        for symbol, value in zip(alphabet, table):
            f.write(f"{symbol}={value}\n")


def load_frequency_table(path, alphabet: Alphabet) -> List[int]:
    """Read a frequency table written by save_frequency_table.

    Lines shorter than 3 characters and lines for symbols outside the
    alphabet are skipped. Symbols missing from the file read as 0.
    """
    table = [0] * len(alphabet)
    with open_text(path) as f:
        for lineno, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if len(line) < 3 or line[1] != "=":
                continue
            pos = alphabet.position(line[0])
            if pos is None:
                continue
            try:
                table[pos] = int(line[2:].strip())
            except ValueError:
                raise ValueError(f"{path}:{lineno}: bad frequency value {line[2:]!r}") from None
    return table


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    cfg_path = sys.argv[1] if len(sys.argv) > 1 else CONFIG_NAME
    try:
        config = load_config(cfg_path)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"alphabet ({len(config.alphabet)}): [{config.alphabet.symbols}]")
    print(f"shift: {config.shift}")
    print(f"sample_size: {config.sample_size}")
    sys.exit(0)
