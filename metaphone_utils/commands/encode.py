"""
Encode command - Print Double Metaphone codes for a file of names
"""

from pathlib import Path
from typing import Iterator

from metaphone_utils.config import DEFAULT_ENCODING
from metaphone_utils.encoder import DoubleMetaphone
from metaphone_utils.utils.logger import get_logger

logger = get_logger()


def iter_names(path: Path, encoding: str = DEFAULT_ENCODING) -> Iterator[str]:
    """Yield one name per line, without the line terminator."""
    with open(path, "r", encoding=encoding, errors="replace", newline="\n") as f:
        for line in f:
            yield line.rstrip("\r\n")


def format_line(name: str, snd: DoubleMetaphone) -> str:
    """'name,primary' or 'name,primary/alternate'."""
    return f"{name},{snd}"


def cmd_encode(args):
    """Handle 'encode' subcommand."""
    if not args.file:
        logger.error("USAGE: metaphone encode <filename>")
        return 1

    path = Path(args.file)
    limit_length = not args.no_limit
    count = 0
    try:
        for name in iter_names(path, args.encoding):
            print(format_line(name, DoubleMetaphone(name, limit_length)))
            count += 1
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        return 1

    logger.info(f"Encoded {count} names from {path}")
    return 0
