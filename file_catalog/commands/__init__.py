"""Command implementations for the File Catalog tool."""

from .duplicates import cmd_duplicates
from .scan import cmd_scan_dirs
from .search import cmd_file_search, cmd_term_search
from .stats import cmd_show_stats

__all__ = [
    'cmd_duplicates',
    'cmd_scan_dirs',
    'cmd_file_search',
    'cmd_term_search',
    'cmd_show_stats',
]
