"""Small helpers for working with keyboard text and UTF-8 letters."""

from __future__ import annotations

from typing import overload


def is_utf_tail(byte: int) -> bool:
    """Return True if ``byte`` is a UTF-8 continuation byte (0b10xxxxxx)."""
    return (byte & 0xC0) == 0x80


def _split_bytes(data: bytes) -> list[bytes]:
    letters: list[bytearray] = []
    for byte in data:
        if letters and is_utf_tail(byte):
            letters[-1].append(byte)
        else:
            letters.append(bytearray((byte,)))
    return [bytes(letter) for letter in letters]


@overload
def split_letters(text: str) -> list[str]: ...


@overload
def split_letters(text: bytes) -> list[bytes]: ...


def split_letters(text):
    """Split text into letters, keeping UTF-8 continuation bytes with their lead byte.

    A ``str`` gives a list of ``str`` letters, ``bytes`` a list of ``bytes``.
    """
    if isinstance(text, (bytes, bytearray)):
        return _split_bytes(bytes(text))
    if isinstance(text, str):
        return [
            part.decode("utf-8", errors="surrogatepass")
            for part in _split_bytes(text.encode("utf-8", errors="surrogatepass"))
        ]
    raise TypeError(f"expected str or bytes, not {type(text).__name__}")