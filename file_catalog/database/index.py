#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
In-memory record index with size, hash and search term lookups.
"""

from typing import Dict, Iterator, List, Optional, Set

from ..errors import DuplicateRecordError
from ..models.file_record import FileRecord


class RecordIndex:
    """Primary path map plus three secondary indices.

    ``insert`` and ``remove`` are the only mutators and always update all
    four maps together. Buckets are dropped as soon as they become empty.
    """

    def __init__(self):
        self.records: Dict[str, FileRecord] = {}
        self.by_size: Dict[int, Set[str]] = {}
        self.by_hash: Dict[str, Set[str]] = {}
        self.by_search_term: Dict[str, Set[str]] = {}

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, path: str) -> bool:
        return path in self.records

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(self.records.values())

    def get(self, path: str) -> Optional[FileRecord]:
        return self.records.get(path)

    def insert(self, record: FileRecord) -> None:
        if record.path in self.records:
            raise DuplicateRecordError(record.path)

        self.records[record.path] = record
        self.by_size.setdefault(record.size, set()).add(record.path)
        self.by_hash.setdefault(record.hash, set()).add(record.path)
        for term in record.search_terms:
            self.by_search_term.setdefault(term, set()).add(record.path)

    def remove(self, path: str) -> Optional[FileRecord]:
        record = self.records.pop(path, None)
        if record is None:
            return None

        _discard(self.by_size, record.size, path)
        _discard(self.by_hash, record.hash, path)
        for term in set(record.search_terms):
            _discard(self.by_search_term, term, path)

        return record

    def paths_under(self, predicate) -> List[str]:
        """Paths of all records accepted by ``predicate(path)``."""
        return [path for path in self.records if predicate(path)]

    def consistency_errors(self) -> List[str]:
        """Describe every way the secondary indices disagree with ``records``."""
        errors = []
        expected_size: Dict[int, Set[str]] = {}
        expected_hash: Dict[str, Set[str]] = {}
        expected_terms: Dict[str, Set[str]] = {}
        for record in self.records.values():
            expected_size.setdefault(record.size, set()).add(record.path)
            expected_hash.setdefault(record.hash, set()).add(record.path)
            for term in record.search_terms:
                expected_terms.setdefault(term, set()).add(record.path)

        for name, actual, expected in (
            ("by_size", self.by_size, expected_size),
            ("by_hash", self.by_hash, expected_hash),
            ("by_search_term", self.by_search_term, expected_terms),
        ):
            for key in set(actual) | set(expected):
                if actual.get(key) != expected.get(key):
                    errors.append(f"{name}[{key!r}]: {sorted(actual.get(key, ()))} "
                                  f"!= {sorted(expected.get(key, ()))}")
        return errors


def _discard(index: Dict, key, path: str) -> None:
    bucket = index.get(key)
    if bucket is None:
        return
    bucket.discard(path)
    if not bucket:
        del index[key]
