"""
heuristics.py - Language-of-origin guesses consulted by the letter rules.
"""
from metaphone_utils.encoder.name_buffer import NameBuffer
from metaphone_utils.encoder.predicates import char_in, is_vowel, matches_one_of

GERMANIC_PREFIXES = ("VAN ", "VON ")


def is_slavo_germanic(buf: NameBuffer) -> bool:
    """True if the name contains W, K, CZ or WITZ."""
    return (buf.contains("W") or buf.contains("K") or
            buf.contains("CZ") or buf.contains("WITZ"))


def starts_germanic(buf: NameBuffer) -> bool:
    """True if the name starts with 'VAN ', 'VON ' or 'SCH'."""
    return matches_one_of(buf, buf.first, 4, GERMANIC_PREFIXES) or \
        buf.window(buf.first, 3) == "SCH"


def is_germanic_c(buf: NameBuffer, pos: int) -> bool:
    """
    'ACH' after a consonant and not followed by I/E ('bacharach', 'lachmann'),
    or the C of '-BACHER'/'-MACHER'.
    """
    return (pos > buf.first + 1 and
            not is_vowel(buf.peek(pos - 2)) and
            buf.window(pos - 1, 3) == "ACH" and
            not char_in(buf.peek(pos + 2), "IE")) or \
        matches_one_of(buf, pos - 2, 6, ("BACHER", "MACHER"))


def is_spanish_ll(buf: NameBuffer, pos: int) -> bool:
    """
    Spanish 'll' sounds like a single L or Y: 'cabrillo', 'gallegos'.
    ``pos`` is the first L.
    """
    last = buf.last
    if pos == last - 2 and matches_one_of(buf, pos - 1, 4, ("ILLO", "ILLA", "ALLE")):
        return True
    return (matches_one_of(buf, last - 1, 2, ("AS", "OS")) or char_in(buf.peek(last), "AO")) \
        and buf.window(pos - 1, 4) == "ALLE"
