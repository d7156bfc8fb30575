"""
metaphone_cli.py - Command-line interface for Double Metaphone name encoding using metaphone_utils
"""

import sys
import argparse

from metaphone_utils.commands import cmd_encode, cmd_compare, cmd_index_build, cmd_index_search
from metaphone_utils.config import DEFAULT_ENCODING, INDEX_TABLE_DEFAULT, db_index_path
from metaphone_utils.utils.logger import get_logger, setup_logger

logger = get_logger()


def build_parser():
    parser = argparse.ArgumentParser(
        prog='metaphone',
        description='Double Metaphone phonetic encoding, matching and name indexing tool',
        epilog="""
Examples:
  # Encode every name in a file (one per line):
  python -m metaphone_utils encode names.txt

  # Full-length codes for a UTF-8 file:
  python -m metaphone_utils encode names.txt --no-limit --encoding utf-8

  # Check whether two names sound alike:
  python -m metaphone_utils compare Schmidt Smith

  # Build a DuckDB name index, then search it by sound:
  python -m metaphone_utils index build names.txt --db names.duckdb
  python -m metaphone_utils index search Smyth --db names.duckdb
""",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    # Global arguments
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose (DEBUG) logging output')
    parser.add_argument('--quiet', '-q', action='store_true', help='Enable quiet mode (WARNING and ERROR only)')
    parser.add_argument('--log-dir', type=str, default=None, help='Also write logs to a rotating file in this directory')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # ========== ENCODE COMMAND ==========
    encode_parser = subparsers.add_parser('encode', help='Print name,primary[/alternate] for each line of a file')
    encode_parser.add_argument('file', nargs='?', default=None, help='File with one name per line')
    encode_parser.add_argument('--no-limit', action='store_true', help='Do not cap codes at 4 characters')
    encode_parser.add_argument('--encoding', type=str, default=DEFAULT_ENCODING, help=f'Input file encoding (default: {DEFAULT_ENCODING})')
    encode_parser.set_defaults(func=cmd_encode)

    # ========== COMPARE COMMAND ==========
    compare_parser = subparsers.add_parser('compare', help='Check whether two names sound alike')
    compare_parser.add_argument('first', help='First name')
    compare_parser.add_argument('second', help='Second name')
    compare_parser.add_argument('--no-limit', action='store_true', help='Do not cap codes at 4 characters')
    compare_parser.set_defaults(func=cmd_compare)

    # ========== INDEX COMMAND ==========
    index_parser = subparsers.add_parser('index', help='DuckDB phonetic name index (build, search)')
    index_subparsers = index_parser.add_subparsers(dest='index_command', help='Index subcommands', required=True)

    # index build
    build_sub = index_subparsers.add_parser('build', help='Index the names in a file')
    build_sub.add_argument('file', help='File with one name per line')
    build_sub.add_argument('--encoding', type=str, default=DEFAULT_ENCODING, help=f'Input file encoding (default: {DEFAULT_ENCODING})')
    build_sub.set_defaults(func=cmd_index_build)

    # index search
    search_sub = index_subparsers.add_parser('search', help='List indexed names that sound like NAME')
    search_sub.add_argument('name', help='Name to look up')
    search_sub.set_defaults(func=cmd_index_search)

    for sub in (build_sub, search_sub):
        sub.add_argument('--db', type=str, default=str(db_index_path), help=f'DuckDB index file (default: {db_index_path})')
        sub.add_argument('--table', type=str, default=INDEX_TABLE_DEFAULT, help=f'Index table (default: {INDEX_TABLE_DEFAULT})')
        sub.add_argument('--no-limit', action='store_true', help='Do not cap codes at 4 characters')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger(log_dir=args.log_dir)

    # Configure logging level (global)
    if args.quiet:
        logger.setLevel(30)
    elif args.verbose:
        logger.setLevel(10)
    else:
        logger.setLevel(20)

    # Check if a command was provided
    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    return args.func(args)

if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting.")
        sys.exit(130)
