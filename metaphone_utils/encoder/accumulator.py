"""
accumulator.py - Collects primary/alternate code fragments during encoding.
"""
from typing import NamedTuple, Optional

from metaphone_utils.config import STOP_LENGTH


class Step(NamedTuple):
    """
    Result of one letter rule.

    ``alternate`` is None when the rule's output reads the same both ways;
    any string (including "") forks the alternate pronunciation.
    """
    primary: str
    alternate: Optional[str]
    position: int


class CodeAccumulator:
    def __init__(self):
        self.primary = ""
        self.alternate = ""
        self.has_alternate = False

    def emit(self, primary: str, alternate: Optional[str] = None):
        if alternate is None:
            self.primary += primary
            self.alternate += primary
        else:
            self.has_alternate = True
            self.primary += primary
            self.alternate += alternate

    def is_saturated(self, length: int = STOP_LENGTH) -> bool:
        return len(self.primary) >= length and len(self.alternate) >= length

    def finalize(self, limit_length: bool, length: int = STOP_LENGTH):
        """
        Truncate when length limited and drop an alternate that never diverged.
        Returns ``(primary, alternate, has_alternate)``.
        """
        primary = self.primary
        alternate = self.alternate if self.has_alternate else ""
        if limit_length:
            primary = primary[:length]
            alternate = alternate[:length]
        return primary, alternate, self.has_alternate
