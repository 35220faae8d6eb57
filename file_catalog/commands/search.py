#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Term and file search commands.
"""

from typing import Sequence

from ..config import DEFAULT_SEARCH_MODE, MAX_RESULTS
from ..database.manager import CatalogStore
from ..highlight import render_listing
from ..jsonio import records_to_json, success
from ..models.file_record import path_to_search_terms
from ..search import SearchResult
from ..utils.console import Console


def print_search_result(console: Console, result: SearchResult, terms: Sequence[str]) -> None:
    if result.missing_term is not None:
        console.write(f"No results found for needle '{result.missing_term}'")
        return

    if not result.records:
        console.write("No results found.")
        return

    for line in render_listing(result.records, terms):
        console.write(line)

    if result.truncated:
        console.write("... (truncated)")


def _search_payload(terms: Sequence[str], mode: str, result: SearchResult) -> dict:
    return {
        "terms": list(terms),
        "mode": mode,
        "missing_term": result.missing_term,
        "total": result.total,
        "truncated": result.truncated,
        "results": records_to_json(result.records),
    }


def cmd_term_search(store: CatalogStore, terms: Sequence[str], mode: str = DEFAULT_SEARCH_MODE,
                    limit: int = MAX_RESULTS, as_json: bool = False) -> int:
    """Find records whose search terms match every given term."""
    store.load()
    result = store.search(terms, mode=mode, limit=limit)

    if as_json:
        return success("term-search", _search_payload(terms, mode, result))

    print_search_result(store.console, result, terms)
    return 0


def cmd_file_search(store: CatalogStore, file_path: str, mode: str = DEFAULT_SEARCH_MODE,
                    limit: int = MAX_RESULTS, as_json: bool = False) -> int:
    """Find records related to ``file_path`` by the terms in its name."""
    terms = list(path_to_search_terms(file_path))
    store.load()
    result = store.search(terms, mode=mode, limit=limit)

    if as_json:
        payload = _search_payload(terms, mode, result)
        payload["file"] = file_path
        return success("file-search", payload)

    print_search_result(store.console, result, terms)
    return 0
