"""Symbol frequency analysis for the Caesar cipher.

Counts how often each alphabet symbol appears in a text and scales the
counts to parts per ten thousand:

    freq = occurrences * 10000 // total_symbols_scanned

The denominator is every symbol scanned, including symbols outside the
alphabet, so a table over a text with punctuation sums to less than 10000.
Matching is exact and case-sensitive.
"""
import sys
from pathlib import Path
from typing import List, Optional, TextIO

sys.path.insert(0, str(Path(__file__).resolve().parent))
from alphabet import Alphabet
from cipher import CHUNK_SIZE, open_text

RATIO = 10000


class EmptyInputError(ValueError):
    """Raised when there is nothing to normalize against."""

    def __init__(self, message: str = "empty input, cannot normalize"):
        super().__init__(message)


def count_symbols(text: str, alphabet: Alphabet, counts: Optional[List[int]] = None) -> List[int]:
    """Raw occurrence count per alphabet position.

    Pass `counts` to keep accumulating into an existing list.
    """
    if counts is None:
        counts = [0] * len(alphabet)
    for ch in text or '':
        pos = alphabet.position(ch)
        if pos is not None:
            counts[pos] += 1
    return counts


def count_symbol(text: Optional[str], symbol: str) -> int:
    """Occurrences of a single symbol in text."""
    if not text:
        return 0
    return text.count(symbol)


def scale(count: int, total: int) -> int:
    """Scale one count to parts per ten thousand."""
    if total <= 0:
        raise EmptyInputError()
    return count * RATIO // total


def normalize(counts: List[int], total: int) -> List[int]:
    """Scale raw counts to parts per ten thousand of `total`."""
    if total <= 0:
        raise EmptyInputError()
    return [scale(c, total) for c in counts]


def analyze_text(text: str, alphabet: Alphabet) -> List[int]:
    """Frequency table for an in-memory text."""
    return normalize(count_symbols(text, alphabet), len(text or ''))


def analyze_stream(stream: TextIO, alphabet: Alphabet, chunk_size: int = CHUNK_SIZE) -> List[int]:
    """Frequency table for a text stream, read to the end in chunks."""
    counts = [0] * len(alphabet)
    total = 0
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        total += len(chunk)
        count_symbols(chunk, alphabet, counts)
    return normalize(counts, total)


def analyze_file(path, alphabet: Alphabet) -> List[int]:
    """Frequency table for a UTF-8 file."""
    with open_text(path) as f:
        return analyze_stream(f, alphabet)
