"""Shift recovery — guess the Caesar shift from the frequency of spaces.

Natural-language text has one very common symbol, the space. For every
candidate shift the ciphertext sample is decrypted, the share of spaces is
measured in parts per ten thousand, and the candidate whose share lands
closest to the reference table wins:

    distance(s) = |reference[pivot] - spaces(decrypt(sample, s)) * 10000 // len(sample)|

Candidates run from 1 to L - 1. Shift 0 is never a valid answer, so a
result with shift 0 means no candidate beat the starting distance of 10000.
On equal distances the lowest shift is kept.

Only a bounded prefix of the ciphertext is examined (SAMPLE_SIZE symbols by
default); the statistic settles well before that on ordinary prose.
"""
import sys
from pathlib import Path
from typing import List, NamedTuple, Optional, TextIO

sys.path.insert(0, str(Path(__file__).resolve().parent))
from alphabet import Alphabet
from cipher import decrypt_text, open_text
from frequency import RATIO, count_symbol, scale

PIVOT = ' '
SAMPLE_SIZE = 1024 * 1024


class RecoveryResult(NamedTuple):
    """Best candidate shift and its distance from the reference."""
    shift: int
    distance: int

    @property
    def matched(self) -> bool:
        return self.shift != 0


NO_MATCH = RecoveryResult(shift=0, distance=RATIO)


def read_sample(stream: TextIO, sample_size: int = SAMPLE_SIZE) -> str:
    """Read at most sample_size symbols from the start of a stream."""
    if sample_size <= 0:
        raise ValueError(f"sample size must be positive, got {sample_size}")
    return stream.read(sample_size)


def reference_frequency(reference: List[int], alphabet: Alphabet, pivot: str = PIVOT) -> int:
    """Reference frequency of the pivot symbol."""
    pos = alphabet.position(pivot)
    if pos is None:
        raise ValueError(f"pivot symbol {pivot!r} is not in the alphabet")
    if pos >= len(reference):
        return 0
    return reference[pos]


def recover_shift(sample: Optional[str], reference: List[int], alphabet: Alphabet,
                  pivot: str = PIVOT) -> RecoveryResult:
    """Search every non-zero shift for the best pivot-frequency match."""
    expected = reference_frequency(reference, alphabet, pivot)
    if not sample:
        return NO_MATCH

    size = len(sample)
    best = NO_MATCH
    for candidate in range(1, len(alphabet)):
        plain = decrypt_text(sample, alphabet, candidate)
        observed = scale(count_symbol(plain, pivot), size)
        distance = abs(expected - observed)
        if distance < best.distance:
            best = RecoveryResult(shift=candidate, distance=distance)
    return best


def recover_file_shift(path, reference: List[int], alphabet: Alphabet,
                       sample_size: int = SAMPLE_SIZE, pivot: str = PIVOT) -> RecoveryResult:
    """Run recover_shift over the first sample_size symbols of a file."""
    with open_text(path) as f:
        sample = read_sample(f, sample_size)
    return recover_shift(sample, reference, alphabet, pivot)
