#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Result structures returned by catalog operations.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict


@dataclass
class ScanReport:
    """Counters for one scanned root."""
    root: str
    found: int = 0
    skipped: int = 0
    created: int = 0
    deleted: int = 0
    failed: int = 0

    def summary_line(self) -> str:
        return (f"root: {self.root}, {self.found} found files, {self.skipped} skipped, "
                f"{self.created} created, {self.deleted} deleted")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CatalogStats:
    """Aggregate counts over the record indices."""
    total_records: int
    unique_sizes: int
    unique_search_terms: int
    unique_hashes: int
    sizes_with_multiple_records: int
    hashes_with_multiple_records: int
    min_term_length: int
    # term length bucket (len // width * width) -> number of shared terms
    term_length_distribution: Dict[int, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["term_length_distribution"] = {
            str(length): count for length, count in sorted(self.term_length_distribution.items())
        }
        return data


@dataclass
class ResolutionSummary:
    """Outcome of an interactive duplicate resolution run."""
    groups: int = 0
    deleted: int = 0
    failed: int = 0
    invalid: int = 0

    def merge(self, other: 'ResolutionSummary') -> 'ResolutionSummary':
        return ResolutionSummary(
            groups=self.groups + other.groups,
            deleted=self.deleted + other.deleted,
            failed=self.failed + other.failed,
            invalid=self.invalid + other.invalid,
        )
