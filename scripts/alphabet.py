"""Alphabet index for the Caesar cipher.

Maps each symbol of the cipher alphabet to its position and back. The
lookup table is built once when the alphabet is loaded; every transform
in cipher.py and every count in frequency.py goes through it.

If a symbol appears more than once, the first occurrence wins.
"""
from typing import Iterator, List, Optional


class Alphabet:
    """Ordered, immutable cipher alphabet with O(1) symbol lookup."""

    def __init__(self, symbols: str):
        if not symbols:
            raise ValueError("alphabet must contain at least one symbol")
        self._symbols = str(symbols)
        self._index = {}
        for pos, symbol in enumerate(self._symbols):
            self._index.setdefault(symbol, pos)

    def __repr__(self) -> str:
        return f"Alphabet({self._symbols!r})"

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self._index

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    @property
    def symbols(self) -> str:
        return self._symbols

    def position(self, symbol: str) -> Optional[int]:
        """Position of symbol, or None when it is not in the alphabet."""
        return self._index.get(symbol)

    def symbol_at(self, position: int) -> str:
        """Symbol at a position, wrapping around the alphabet length."""
        return self._symbols[position % len(self._symbols)]

    def duplicates(self) -> List[str]:
        """Symbols listed more than once, in order of first repeat."""
        seen = set()
        repeated = []
        for symbol in self._symbols:
            if symbol in seen and symbol not in repeated:
                repeated.append(symbol)
            seen.add(symbol)
        return repeated


def parse_alphabet(literal: str) -> Optional[Alphabet]:
    """Build an Alphabet from a bracket literal like ``[abc ]``.

    The first and last characters are dropped. Returns None when the
    literal is too short to hold any symbol.
    """
    if literal is None or len(literal) <= 2:
        return None
    return Alphabet(literal[1:-1])
