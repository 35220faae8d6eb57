#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Catalog store: the record index, its CSV file and the operations over both.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from tqdm import tqdm

from ..config import (DEFAULT_SEARCH_MIN_LENGTH, MAX_RESULTS, MODE_SLOW,
                      TERM_BUCKET_WIDTH)
from ..errors import DuplicateRecordError, ScanError
from ..grouping import group_by_search_term, group_by_size_and_hash
from ..models.file_record import FileRecord
from ..models.reports import CatalogStats, ResolutionSummary, ScanReport
from ..scanning.extractor import FeatureExtractor
from ..search import SearchEngine, SearchResult
from ..storage.filesystem import LocalFileSystem
from ..utils.console import Console
from ..utils.locks import ReadWriteLock
from ..utils.path import is_under_root
from .codec import decode_rows, encode_records, read_catalog, write_catalog
from .index import RecordIndex

logger = logging.getLogger(__name__)


class CatalogStore:
    """In-memory catalog backed by a CSV file.

    Every public operation holds the store lock for its whole duration:
    shared for lookups, exclusive for anything that changes the index.
    """

    def __init__(self, catalog_path: Path, console: Optional[Console] = None,
                 filesystem: Optional[LocalFileSystem] = None,
                 show_progress: bool = False):
        self.catalog_path = Path(catalog_path)
        self.console = console or Console()
        self.filesystem = filesystem or LocalFileSystem()
        self.extractor = FeatureExtractor(self.filesystem)
        self.show_progress = show_progress
        self.index = RecordIndex()
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self.index)

    def __contains__(self, path: str) -> bool:
        with self._lock.read_locked():
            return path in self.index

    def get(self, path: str) -> Optional[FileRecord]:
        with self._lock.read_locked():
            return self.index.get(path)

    def records(self) -> List[FileRecord]:
        """Snapshot of all records, ordered by path."""
        with self._lock.read_locked():
            return sorted(self.index, key=lambda r: r.path)

    # Loading and persistence

    def load(self, missing_ok: bool = False) -> int:
        """Load the catalog file. Returns the number of records added."""
        with self._lock.write_locked():
            rows = read_catalog(self.catalog_path, missing_ok=missing_ok)
            added = self._load_rows(rows)
        logger.info("Loaded %d records from %s", added, self.catalog_path)
        return added

    def load_rows(self, rows: Iterable[Sequence[str]]) -> int:
        with self._lock.write_locked():
            return self._load_rows(rows)

    def _load_rows(self, rows: Iterable[Sequence[str]]) -> int:
        added = 0
        for path, size, file_hash in decode_rows(rows):
            try:
                self.index.insert(FileRecord.create(path, size, file_hash))
            except DuplicateRecordError as e:
                logger.warning("Unable to add record to catalog, file path: %s, error: %s", path, e)
                continue
            added += 1
        return added

    def write(self) -> None:
        """Rewrite the catalog file from the current records."""
        with self._lock.read_locked():
            rows = encode_records(self.index)
            write_catalog(self.catalog_path, rows)
        logger.info("Wrote %d records to %s", len(rows), self.catalog_path)

    # Mutation

    def add(self, path: str, size: int, file_hash: str) -> FileRecord:
        record = FileRecord.create(path, size, file_hash)
        with self._lock.write_locked():
            self.index.insert(record)
        return record

    def remove(self, path: str) -> Optional[FileRecord]:
        with self._lock.write_locked():
            return self.index.remove(path)

    def scan(self, roots: Sequence[str]) -> List[ScanReport]:
        """Reconcile the catalog with the files currently under each root."""
        reports = []
        with self._lock.write_locked():
            for root in roots:
                try:
                    files = self.filesystem.list_files(root)
                except OSError as e:
                    raise ScanError(f"unable to collect files in root {root}: {e}") from e

                report = self._reconcile_root(root, files)
                self.console.write(report.summary_line())
                reports.append(report)
        return reports

    def _reconcile_root(self, root: str, files: set) -> ScanReport:
        report = ScanReport(root=root, found=len(files))

        new_paths = []
        for path in sorted(files):
            if path in self.index:
                report.skipped += 1
            else:
                new_paths.append(path)

        progress = tqdm(new_paths, desc=f"Hashing {root}", unit="file",
                        disable=not self.show_progress or not new_paths, leave=False)
        for path in progress:
            record = self.extractor.extract_features(path)
            if record is None:
                report.failed += 1
                continue
            self.index.insert(record)
            report.created += 1

        # Drop records for files that disappeared from this root.
        gone = [path for path in self.index.paths_under(lambda p: is_under_root(p, root))
                if path not in files]
        for path in gone:
            self.index.remove(path)
            report.deleted += 1

        logger.debug("Reconciled %s: %s", root, report)
        return report

    # Queries

    def search(self, terms: Sequence[str], mode: str = MODE_SLOW,
               limit: int = MAX_RESULTS) -> SearchResult:
        with self._lock.read_locked():
            return SearchEngine(self.index, limit=limit).search(terms, mode)

    def stats(self, min_term_length: int = DEFAULT_SEARCH_MIN_LENGTH) -> CatalogStats:
        with self._lock.read_locked():
            distribution: Counter = Counter()
            for term, paths in self.index.by_search_term.items():
                if len(paths) < 2 or len(term) < min_term_length:
                    continue
                bucket = len(term) // TERM_BUCKET_WIDTH
                distribution[bucket * TERM_BUCKET_WIDTH] += 1

            return CatalogStats(
                total_records=len(self.index),
                unique_sizes=len(self.index.by_size),
                unique_search_terms=len(self.index.by_search_term),
                unique_hashes=len(self.index.by_hash),
                sizes_with_multiple_records=sum(
                    1 for paths in self.index.by_size.values() if len(paths) > 1),
                hashes_with_multiple_records=sum(
                    1 for paths in self.index.by_hash.values() if len(paths) > 1),
                min_term_length=min_term_length,
                term_length_distribution=dict(sorted(distribution.items())),
            )

    def duplicates(self, resolver, min_length: int = DEFAULT_SEARCH_MIN_LENGTH) -> ResolutionSummary:
        """Run both duplicate passes through ``resolver``.

        Each pass works on a snapshot of candidate groups taken when the pass
        starts; the search term pass sees the deletions made by the hash pass.
        """
        with self._lock.write_locked():
            hash_groups = group_by_size_and_hash(self.index)
            logger.info("Found %d size and hash groups", len(hash_groups))
            summary = resolver.resolve(self, hash_groups)

            term_groups = group_by_search_term(self.index, min_length)
            logger.info("Found %d search term groups (min length %d)", len(term_groups), min_length)
            summary = summary.merge(resolver.resolve(self, term_groups))

        return summary
