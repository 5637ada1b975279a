"""Cipher text engine — Caesar shift over a configurable alphabet.

Symbols in the alphabet move `shift` positions forward on encrypt and back
on decrypt, wrapping around the alphabet length. Anything outside the
alphabet (punctuation, other scripts, newlines) passes through unchanged,
so output always has the same length as input.

Usage:
    from alphabet import Alphabet
    from cipher import encrypt_text, decrypt_text, encrypt_file

    abc = Alphabet("abcdefghijklmnopqrstuvwxyz ")
    secret = encrypt_text("attack at dawn", abc, 5)
"""
import sys
from pathlib import Path
from typing import Optional, TextIO

sys.path.insert(0, str(Path(__file__).resolve().parent))
from alphabet import Alphabet

CHARSET = "utf-8"
CHUNK_SIZE = 1024


# ---------------------------------------------------------------------------
# Symbol and text transforms
# ---------------------------------------------------------------------------

def shift_symbol(symbol: str, alphabet: Alphabet, amount: int, forward: bool = True) -> str:
    """Shift one symbol forward (encrypt) or backward (decrypt)."""
    pos = alphabet.position(symbol)
    if pos is None:
        return symbol
    size = len(alphabet)
    if forward:
        new_pos = (pos + amount) % size
    else:
        new_pos = (size + pos - amount) % size
    return alphabet.symbol_at(new_pos)


def _transform(text: Optional[str], alphabet: Alphabet, shift: int, forward: bool) -> Optional[str]:
    if not text:
        return text
    return ''.join(shift_symbol(ch, alphabet, shift, forward) for ch in text)


def encrypt_text(text: Optional[str], alphabet: Alphabet, shift: int) -> Optional[str]:
    """Encrypt text. Empty or None input is returned as-is."""
    return _transform(text, alphabet, shift, forward=True)


def decrypt_text(text: Optional[str], alphabet: Alphabet, shift: int) -> Optional[str]:
    """Decrypt text produced by encrypt_text with the same shift."""
    return _transform(text, alphabet, shift, forward=False)


# ---------------------------------------------------------------------------
# Streams and files
# ---------------------------------------------------------------------------

def _transform_stream(src: TextIO, dst: TextIO, alphabet: Alphabet, shift: int,
                      forward: bool, chunk_size: int) -> int:
    processed = 0
    while True:
        chunk = src.read(chunk_size)
        if not chunk:
            break
        processed += len(chunk)
        dst.write(_transform(chunk, alphabet, shift, forward))
    return processed


def encrypt_stream(src: TextIO, dst: TextIO, alphabet: Alphabet, shift: int,
                   chunk_size: int = CHUNK_SIZE) -> int:
    """Encrypt src into dst chunk by chunk. Returns symbols processed."""
    return _transform_stream(src, dst, alphabet, shift, True, chunk_size)


def decrypt_stream(src: TextIO, dst: TextIO, alphabet: Alphabet, shift: int,
                   chunk_size: int = CHUNK_SIZE) -> int:
    """Decrypt src into dst chunk by chunk. Returns symbols processed."""
    return _transform_stream(src, dst, alphabet, shift, False, chunk_size)


def open_text(path, mode: str = "r") -> TextIO:
    """Open a text file as UTF-8 without newline translation."""
    return open(path, mode, encoding=CHARSET, newline='')


def encrypt_file(src_path, dst_path, alphabet: Alphabet, shift: int) -> int:
    """Encrypt one file into another. Returns symbols processed."""
    with open_text(src_path) as src, open_text(dst_path, "w") as dst:
        return encrypt_stream(src, dst, alphabet, shift)


def decrypt_file(src_path, dst_path, alphabet: Alphabet, shift: int) -> int:
    """Decrypt one file into another. Returns symbols processed."""
    with open_text(src_path) as src, open_text(dst_path, "w") as dst:
        return decrypt_stream(src, dst, alphabet, shift)
