"""
Index commands - Build and search a DuckDB phonetic name index
"""

from pathlib import Path

import duckdb

from metaphone_utils.commands.encode import iter_names
from metaphone_utils.index import build_name_index, search_name_index
from metaphone_utils.utils.logger import get_logger

logger = get_logger()


def cmd_index_build(args):
    """Handle 'index build' subcommand."""
    path = Path(args.file)
    try:
        names = list(iter_names(path, args.encoding))
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        return 1

    if not any(n.strip() for n in names):
        logger.error(f"No names found in {path}")
        return 1

    try:
        count = build_name_index(names, args.db, args.table, limit_length=not args.no_limit)
    except (OSError, ValueError, duckdb.Error) as e:
        logger.error(f"Index build failed: {e}")
        return 1

    print(f"Indexed {count} names into {args.db} (table {args.table})")
    return 0


def cmd_index_search(args):
    """Handle 'index search' subcommand."""
    if not Path(args.db).exists():
        logger.error(f"Index database not found: {args.db}")
        return 1

    try:
        matches = search_name_index(args.name, args.db, args.table, limit_length=not args.no_limit)
    except (OSError, ValueError, duckdb.Error) as e:
        logger.error(f"Index search failed: {e}")
        return 1

    if matches.empty:
        logger.info(f"No names sound like '{args.name}'")
        return 0

    for row in matches.itertuples(index=False):
        if isinstance(row.alternate_code, str):
            print(f"{row.name},{row.primary_code}/{row.alternate_code}")
        else:
            print(f"{row.name},{row.primary_code}")
    return 0
