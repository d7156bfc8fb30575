from pathlib import Path

# Classic Metaphone code length, applied when limit_length is on
STOP_LENGTH = 4

DEFAULT_LIMIT_LENGTH = True

# Returned by NameBuffer.peek/window for positions outside the name
SENTINEL = "_"

db_path = Path((__file__)).parent.parent / "database"

INDEX_TABLE_DEFAULT = "names"

db_index_path = db_path / f"{INDEX_TABLE_DEFAULT}.duckdb"

# Name files are one byte per character (ASCII / ISO-8859-1)
DEFAULT_ENCODING = "latin-1"
