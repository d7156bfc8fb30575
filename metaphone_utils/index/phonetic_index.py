"""
phonetic_index.py - DuckDB name index keyed by Double Metaphone codes.

- encode_frame: adds primary/alternate code columns to a pandas DataFrame
- build_name_index: (re)creates a DuckDB table of names with their codes,
  computed in SQL through scalar functions backed by the encoder
- search_name_index: finds indexed names that sound like a given name

The index stores ``alternate_code`` as NULL for names with a single
pronunciation. Build and search with the same ``limit_length`` setting.

Usage:
    build_name_index(["Smith", "Schmidt", "Jones"], "names.duckdb")
    search_name_index("Smyth", "names.duckdb")
"""
import re
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

import duckdb
import pandas as pd

from metaphone_utils.config import DEFAULT_LIMIT_LENGTH, INDEX_TABLE_DEFAULT
from metaphone_utils.encoder import DoubleMetaphone
from metaphone_utils.utils.logger import get_logger

logger = get_logger()

_TABLE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _check_table(table: str) -> str:
    if not _TABLE_NAME.match(table or ""):
        raise ValueError(f"Invalid table name: {table!r}")
    return table


def _name_codes(value, limit_length: bool) -> Tuple[str, str]:
    if isinstance(value, (str, bytes)):
        return DoubleMetaphone(value, limit_length).codes()
    if value is None or pd.isna(value):
        return "", ""
    return DoubleMetaphone(str(value), limit_length).codes()


def encode_frame(df: pd.DataFrame, column: str, limit_length: bool = DEFAULT_LIMIT_LENGTH) -> pd.DataFrame:
    """
    Return a copy of ``df`` with ``primary`` and ``alternate`` columns.

    Args:
        df: Input frame.
        column: Column holding the names; missing values get empty codes.
        limit_length: Cap codes at 4 characters.

    Returns:
        New DataFrame; ``df`` is left untouched.
    """
    out = df.copy()
    codes = out[column].apply(lambda v: _name_codes(v, limit_length))
    out["primary"] = [p for p, _ in codes]
    out["alternate"] = [a for _, a in codes]
    return out


def register_functions(con: duckdb.DuckDBPyConnection, limit_length: bool = DEFAULT_LIMIT_LENGTH):
    """
    Register ``metaphone_primary(name)`` and ``metaphone_alternate(name)`` on
    a connection. NULL names give NULL codes; ``metaphone_alternate`` is NULL
    when the name has a single pronunciation.
    """
    def metaphone_primary(name: Optional[str]) -> Optional[str]:
        if name is None:
            return None
        return DoubleMetaphone(name, limit_length).primary

    def metaphone_alternate(name: Optional[str]) -> Optional[str]:
        if name is None:
            return None
        snd = DoubleMetaphone(name, limit_length)
        return snd.alternate if snd.has_alternate else None

    con.create_function("metaphone_primary", metaphone_primary, ["VARCHAR"], "VARCHAR",
                        null_handling="special")
    con.create_function("metaphone_alternate", metaphone_alternate, ["VARCHAR"], "VARCHAR",
                        null_handling="special")


def build_name_index(
    names: Iterable[str],
    db_path: Union[str, Path],
    table: str = INDEX_TABLE_DEFAULT,
    limit_length: bool = DEFAULT_LIMIT_LENGTH
) -> int:
    """
    Create (or replace) ``table`` in the DuckDB file at ``db_path``.

    Args:
        names: Names to index; blank entries are skipped.
        db_path: DuckDB database file, created if missing.
        table: Table name (letters, digits, underscore).
        limit_length: Cap codes at 4 characters.

    Returns:
        Number of indexed rows.
    """
    table = _check_table(table)
    df = pd.DataFrame({"name": [n for n in names if n and n.strip()]})
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    logger.info(f"Indexing {len(df):,} names into {db_path} (table {table})")
    con = duckdb.connect(str(db_path))
    try:
        register_functions(con, limit_length)
        con.register("_names_df", df)
        con.execute(f"""
            CREATE OR REPLACE TABLE {table} AS
            SELECT
                CAST(name AS VARCHAR) AS name,
                metaphone_primary(CAST(name AS VARCHAR)) AS primary_code,
                metaphone_alternate(CAST(name AS VARCHAR)) AS alternate_code
            FROM _names_df
        """)
        con.execute(f"CREATE INDEX IF NOT EXISTS {table}_primary_idx ON {table}(primary_code)")
        count = con.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
        logger.info(f"Inserted {count:,} records into {table}")
        return count
    except Exception as e:
        logger.error(f"Failed to build name index {db_path}: {e}")
        raise
    finally:
        con.close()


def search_name_index(
    name: str,
    db_path: Union[str, Path],
    table: str = INDEX_TABLE_DEFAULT,
    limit_length: bool = DEFAULT_LIMIT_LENGTH
) -> pd.DataFrame:
    """
    Return the indexed names that sound like ``name``.

    A row matches when the name's primary equals the row's primary or
    alternate, or the name's alternate equals the row's alternate or
    primary.

    Returns:
        DataFrame with ``name``, ``primary_code`` and ``alternate_code``,
        ordered by name.
    """
    table = _check_table(table)
    snd = DoubleMetaphone(name, limit_length)
    logger.debug(f"Searching {table} for {name!r} ({snd})")

    con = duckdb.connect(str(db_path), read_only=True)
    try:
        return con.execute(f"""
            SELECT name, primary_code, alternate_code
            FROM {table}
            WHERE primary_code = ?
               OR alternate_code = ?
               OR (? AND alternate_code = ?)
               OR (? AND primary_code = ?)
            ORDER BY name
        """, [
            snd.primary,
            snd.primary,
            snd.has_alternate, snd.alternate,
            snd.has_alternate, snd.alternate,
        ]).fetchdf()
    except Exception as e:
        logger.error(f"Failed to search name index {db_path}: {e}")
        raise
    finally:
        con.close()
