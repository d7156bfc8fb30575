"""
predicates.py - Stateless window and character tests used by the letter rules.
"""
from typing import Sequence

from metaphone_utils.encoder.name_buffer import NameBuffer

VOWELS = "AEIOUY"


def matches_one_of(buf: NameBuffer, pos: int, length: int, candidates: Sequence[str]) -> bool:
    """
    Return True if the ``length`` characters of ``buf`` starting at ``pos``
    equal one of ``candidates``.

    Every candidate must be exactly ``length`` characters long.
    """
    assert all(len(c) == length for c in candidates), \
        f"candidates {candidates!r} must all be {length} characters"
    return buf.window(pos, length) in candidates


def char_in(ch: str, chars: str) -> bool:
    return len(ch) == 1 and ch in chars


def is_vowel(ch: str) -> bool:
    return char_in(ch, VOWELS)
