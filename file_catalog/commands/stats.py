#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Statistics command for the File Catalog tool.
"""

from ..config import DEFAULT_SEARCH_MIN_LENGTH
from ..database.manager import CatalogStore
from ..jsonio import success


def cmd_show_stats(store: CatalogStore, min_term_length: int = DEFAULT_SEARCH_MIN_LENGTH,
                   as_json: bool = False) -> int:
    """Show catalog statistics.

    Args:
        store: CatalogStore to load and inspect.
        min_term_length: Shortest search term counted in the length distribution.
        as_json: If True, emit a single JSON envelope to stdout instead of text.

    Returns:
        Process exit status.
    """
    store.load()
    stats = store.stats(min_term_length)

    if as_json:
        return success("stats", stats.to_dict())

    out = store.console
    out.write(f"Total records: {stats.total_records}")
    out.write(f"Total unique sizes: {stats.unique_sizes}")
    out.write(f"Total unique search terms: {stats.unique_search_terms}")
    out.write(f"Total unique hashes: {stats.unique_hashes}")
    out.write(f"Sizes with multiple records: {stats.sizes_with_multiple_records}")
    out.write(f"Hashes with multiple records: {stats.hashes_with_multiple_records}")
    out.write()
    out.write("Search term length distribution:")
    for length, count in stats.term_length_distribution.items():
        out.write(f"Search terms with length {length}: {count}")
    return 0
