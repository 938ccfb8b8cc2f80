"""Crockford Base32 tables used by the ULID text codec.

Emission uses only the 32 canonical symbols. Decoding is case-insensitive and
accepts the visually confusable aliases ``I``/``L`` (1) and ``O`` (0); ``U`` and
anything outside 7-bit ASCII are rejected.
"""

from __future__ import annotations

from packages.ulid_core.errors.exceptions import InvalidCharacter

ENCODE = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
INVALID = 0xFF

_ALIASES = {"I": 1, "L": 1, "O": 0}


def _build_decode_table() -> tuple[int, ...]:
    table = [INVALID] * 128
    for index, char in enumerate(ENCODE):
        table[ord(char)] = index
        table[ord(char.lower())] = index
    for char, index in _ALIASES.items():
        table[ord(char)] = index
        table[ord(char.lower())] = index
    return tuple(table)


DECODE = _build_decode_table()


def encode_int(value: int, length: int) -> str:
    """Encode a non-negative int as ``length`` symbols, most significant first."""
    if value < 0:
        raise ValueError("value must be non-negative")
    chars: list[str] = []
    for _ in range(length):
        value, remainder = divmod(value, 32)
        chars.append(ENCODE[remainder])
    return "".join(reversed(chars))


def decode_str(text: str) -> int:
    """Decode Crockford symbols into one integer, 5 bits per symbol.

    Raises ``InvalidCharacter`` naming the first offending code unit. The
    result is not truncated; callers mask it to their field width.
    """
    number = 0
    for position, char in enumerate(text):
        codepoint = ord(char)
        symbol = DECODE[codepoint] if codepoint < 128 else INVALID
        if symbol == INVALID:
            raise InvalidCharacter(codepoint, position)
        number = (number << 5) | symbol
    return number
