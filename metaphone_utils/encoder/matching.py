"""
matching.py - Decide whether two encoded names sound alike.
"""
from metaphone_utils.config import DEFAULT_LIMIT_LENGTH


def codes_match(lhs, rhs) -> bool:
    """
    True if any pronunciation of ``lhs`` equals any pronunciation of ``rhs``.

    Works on anything with ``primary``, ``alternate`` and ``has_alternate``.
    """
    return (lhs.primary == rhs.primary or
            (rhs.has_alternate and lhs.primary == rhs.alternate) or
            (lhs.has_alternate and rhs.has_alternate and lhs.alternate == rhs.alternate) or
            (lhs.has_alternate and lhs.alternate == rhs.primary))


def sounds_like(lhs, rhs, limit_length: bool = DEFAULT_LIMIT_LENGTH) -> bool:
    """
    Encode two raw names (``str`` or ``bytes``, in any mix) with the same
    length setting and compare them.
    """
    from metaphone_utils.encoder.double_metaphone import DoubleMetaphone

    return codes_match(DoubleMetaphone(lhs, limit_length), DoubleMetaphone(rhs, limit_length))
