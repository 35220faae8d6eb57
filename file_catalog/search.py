#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Search term lookups over the record index.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set

from .config import MAX_RESULTS, MODE_FAST, MODE_SLOW
from .database.index import RecordIndex
from .models.file_record import FileRecord

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Matched records (ordered by path, capped) and why a search stopped."""
    records: List[FileRecord] = field(default_factory=list)
    total: int = 0
    missing_term: Optional[str] = None

    @property
    def truncated(self) -> bool:
        return self.total > len(self.records)


def intersect_all(groups: Sequence[Set[str]]) -> Set[str]:
    """Intersect path sets, stopping as soon as nothing is left."""
    if not groups:
        return set()

    result = set(groups[0])
    for paths in groups[1:]:
        result &= paths
        if not result:
            break
    return result


class SearchEngine:
    """Resolves search terms to records in exact or substring mode."""

    def __init__(self, index: RecordIndex, limit: int = MAX_RESULTS):
        self.index = index
        self.limit = limit

    def collect_exact(self, term: str) -> Set[str]:
        return set(self.index.by_search_term.get(term, ()))

    def collect_fuzzy(self, term: str) -> Set[str]:
        needle = term.lower()
        found: Set[str] = set()
        for key, paths in self.index.by_search_term.items():
            if needle in key:
                found |= paths
        return found

    def search(self, terms: Sequence[str], mode: str = MODE_SLOW) -> SearchResult:
        if mode == MODE_FAST:
            collect = self.collect_exact
        elif mode == MODE_SLOW:
            collect = self.collect_fuzzy
        else:
            raise ValueError(f"unknown search mode: {mode!r}")

        groups = []
        for term in terms:
            paths = collect(term)
            if not paths:
                logger.debug("No records for term %r (%s mode)", term, mode)
                return SearchResult(missing_term=term)
            groups.append(paths)

        matched = sorted(intersect_all(groups))
        return SearchResult(
            records=[self.index.records[path] for path in matched[:self.limit]],
            total=len(matched),
        )
