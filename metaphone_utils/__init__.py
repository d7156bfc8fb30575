"""
metaphone_utils - Double Metaphone name encoding, matching and indexing
"""

from metaphone_utils.encoder import DoubleMetaphone, codes_match, double_metaphone, sounds_like

__version__ = "0.1.0"

__all__ = [
    "DoubleMetaphone",
    "double_metaphone",
    "codes_match",
    "sounds_like",
]
