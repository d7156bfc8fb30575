"""
Command modules for metaphone_utils CLI
"""

from metaphone_utils.commands.encode import cmd_encode
from metaphone_utils.commands.compare import cmd_compare
from metaphone_utils.commands.index import cmd_index_build, cmd_index_search

__all__ = [
    'cmd_encode',
    'cmd_compare',
    'cmd_index_build',
    'cmd_index_search',
]
