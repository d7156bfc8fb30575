"""
name_buffer.py - Normalized, read-only letter sequence consumed by the encoder.

Names arrive either narrow (``bytes``, one byte per character, ASCII or
ISO-8859-1/15) or wide (``str``). Both end up as the same uppercase sequence
over A-Z, space, Ç and Ñ. Lookups outside the name return ``SENTINEL`` so the
letter rules can look up to a few characters behind or ahead of the cursor
without bounds checks of their own.
"""
from __future__ import annotations

from typing import Union

from metaphone_utils.config import SENTINEL

C_CEDILLA = "Ç"
N_TILDE = "Ñ"

_SMALL_C_CEDILLA = 0xE7
_SMALL_N_TILDE = 0xF1
_CAP_C_CEDILLA = _SMALL_C_CEDILLA - 0x20
_CAP_N_TILDE = _SMALL_N_TILDE - 0x20

_WIDE_ALPHABET = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz ÇçÑñ"
)


def _normalize_byte(b: int) -> int:
    """Return the uppercase form of a supported byte, or -1 to drop it."""
    if 0x41 <= b <= 0x5A or b == 0x20 or b == _CAP_C_CEDILLA or b == _CAP_N_TILDE:
        return b
    if 0x61 <= b <= 0x7A or b == _SMALL_C_CEDILLA or b == _SMALL_N_TILDE:
        return b - 0x20
    return -1


class NameBuffer:
    """Immutable uppercase name with sentinel-padded lookups."""

    __slots__ = ("_text",)

    def __init__(self, text: str = ""):
        object.__setattr__(self, "_text", text)

    def __setattr__(self, key, value):
        raise AttributeError("NameBuffer is immutable")

    @classmethod
    def from_narrow(cls, data: bytes) -> "NameBuffer":
        """
        Normalize a narrow name.

        Lowercase ASCII letters and ç/ñ are uppercased; uppercase letters,
        space, Ç and Ñ pass through; every other byte is dropped.
        """
        kept = bytearray()
        for b in data:
            upper = _normalize_byte(b)
            if upper >= 0:
                kept.append(upper)
        return cls(kept.decode("latin-1"))

    @classmethod
    def from_wide(cls, text: str) -> "NameBuffer":
        """
        Normalize a wide name by filtering it down to the supported alphabet
        and handing the result to the narrow path.
        """
        filtered = "".join(ch for ch in text if ch in _WIDE_ALPHABET)
        return cls.from_narrow(filtered.encode("latin-1"))

    @classmethod
    def from_name(cls, name: Union[str, bytes, bytearray]) -> "NameBuffer":
        if isinstance(name, str):
            return cls.from_wide(name)
        if isinstance(name, (bytes, bytearray)):
            return cls.from_narrow(bytes(name))
        raise TypeError(f"name must be str or bytes, not {type(name).__name__}")

    @property
    def text(self) -> str:
        return self._text

    @property
    def first(self) -> int:
        return 0

    @property
    def last(self) -> int:
        """Index of the last real letter; -1 for an empty name."""
        return len(self._text) - 1

    def peek(self, pos: int) -> str:
        if 0 <= pos < len(self._text):
            return self._text[pos]
        return SENTINEL

    def window(self, pos: int, length: int) -> str:
        """Return ``length`` characters starting at ``pos``, sentinel-filled past either edge."""
        if pos >= 0 and pos + length <= len(self._text):
            return self._text[pos:pos + length]
        return "".join(self.peek(i) for i in range(pos, pos + length))

    def contains(self, fragment: str) -> bool:
        return fragment in self._text

    def startswith(self, prefix: str) -> bool:
        return self._text.startswith(prefix)

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"NameBuffer({self._text!r})"
