"""
Compare command - Check whether two names sound alike
"""

from metaphone_utils.encoder import DoubleMetaphone
from metaphone_utils.commands.encode import format_line


def cmd_compare(args):
    """Handle 'compare' subcommand."""
    limit_length = not args.no_limit
    first = DoubleMetaphone(args.first, limit_length)
    second = DoubleMetaphone(args.second, limit_length)

    print(format_line(args.first, first))
    print(format_line(args.second, second))
    if first == second:
        print(f"'{args.first}' sounds like '{args.second}'")
    else:
        print(f"'{args.first}' does not sound like '{args.second}'")
    return 0
