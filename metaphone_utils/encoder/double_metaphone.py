"""
double_metaphone.py - Double Metaphone encoding of a single name.

Usage:
    from metaphone_utils import DoubleMetaphone

    snd = DoubleMetaphone("Schmidt")
    snd.primary        # 'XMT'
    snd.alternate      # 'SMT'
    snd == "Smith"     # True

A ``str`` is treated as wide text and filtered to A-Z, space, Ç/ç and Ñ/ñ
before it is handed to the narrow (``bytes``) path; ``bytes`` are read as
ASCII / ISO-8859-1. Both paths produce the same NameBuffer for the same
letters.
"""
from __future__ import annotations

from typing import Tuple, Union

from metaphone_utils.config import DEFAULT_LIMIT_LENGTH, STOP_LENGTH
from metaphone_utils.encoder.accumulator import CodeAccumulator
from metaphone_utils.encoder.matching import codes_match
from metaphone_utils.encoder.name_buffer import NameBuffer
from metaphone_utils.encoder.rules import rule_for, skip_silent_start

Name = Union[str, bytes, bytearray]


def encode_buffer(buf: NameBuffer, limit_length: bool = DEFAULT_LIMIT_LENGTH) -> Tuple[str, str, bool]:
    """
    Run the encoder over a normalized name.

    Args:
        buf: Normalized name.
        limit_length: Stop once both codes reach STOP_LENGTH and truncate to it.

    Returns:
        ``(primary, alternate, has_alternate)``; ``alternate`` is "" when the
        name has a single pronunciation.
    """
    codes = CodeAccumulator()
    pos = skip_silent_start(buf)

    while pos <= buf.last:
        if limit_length and codes.is_saturated(STOP_LENGTH):
            break
        step = rule_for(buf.peek(pos))(buf, pos)
        codes.emit(step.primary, step.alternate)
        pos = step.position

    return codes.finalize(limit_length, STOP_LENGTH)


class DoubleMetaphone:
    """
    Phonetic encoding of one name. Read-only once constructed.

    Args:
        name: Wide (``str``) or narrow (``bytes``) name.
        limit_length: Cap both codes at STOP_LENGTH characters (default True).
    """

    __slots__ = ("_primary", "_alternate", "_has_alternate", "_limit_length")

    def __init__(self, name: Name, limit_length: bool = DEFAULT_LIMIT_LENGTH):
        # str input is filtered, then normalized through the narrow path
        self._encode(NameBuffer.from_name(name), limit_length)

    def _encode(self, buf: NameBuffer, limit_length: bool):
        primary, alternate, has_alternate = encode_buffer(buf, limit_length)
        object.__setattr__(self, "_primary", primary)
        object.__setattr__(self, "_alternate", alternate)
        object.__setattr__(self, "_has_alternate", has_alternate)
        object.__setattr__(self, "_limit_length", bool(limit_length))

    def __setattr__(self, key, value):
        raise AttributeError("DoubleMetaphone is read-only")

    @property
    def primary(self) -> str:
        """Most likely (American English) pronunciation."""
        return self._primary

    @property
    def alternate(self) -> str:
        """Secondary pronunciation, "" if has_alternate is False."""
        return self._alternate

    @property
    def has_alternate(self) -> bool:
        return self._has_alternate

    @property
    def limit_length(self) -> bool:
        return self._limit_length

    def codes(self) -> Tuple[str, str]:
        return self._primary, self._alternate

    def __eq__(self, other):
        if isinstance(other, (str, bytes, bytearray)):
            other = DoubleMetaphone(other, self._limit_length)
        if not isinstance(other, DoubleMetaphone):
            return NotImplemented
        return codes_match(self, other)

    # equality is sounds-alike, which is not transitive
    __hash__ = None

    def __str__(self) -> str:
        if self._has_alternate:
            return f"{self._primary}/{self._alternate}"
        return self._primary

    def __repr__(self) -> str:
        return (f"DoubleMetaphone(primary={self._primary!r}, alternate={self._alternate!r}, "
                f"has_alternate={self._has_alternate})")


def double_metaphone(name: Name, limit_length: bool = DEFAULT_LIMIT_LENGTH) -> Tuple[str, str]:
    """Return ``(primary, alternate)`` for a name."""
    return DoubleMetaphone(name, limit_length).codes()
