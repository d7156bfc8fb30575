"""
encoder: Double Metaphone phonetic encoding

Modules:
	- name_buffer: Normalizes str/bytes names to the supported alphabet
	- predicates: Window and character tests
	- heuristics: Slavo-germanic, germanic and spanish guesses
	- rules: Per-letter rules and the dispatch table
	- accumulator: Primary/alternate code collection and truncation
	- double_metaphone: The DoubleMetaphone value class
	- matching: Sounds-alike comparison
"""

from .double_metaphone import DoubleMetaphone, double_metaphone, encode_buffer
from .matching import codes_match, sounds_like
from .name_buffer import NameBuffer

__all__ = [
    "DoubleMetaphone", "double_metaphone", "encode_buffer",
    "codes_match", "sounds_like",
    "NameBuffer",
]
