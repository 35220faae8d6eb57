#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Duplicate candidate groups for the File Catalog tool.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class GroupStrategy(Enum):
    """How a candidate group was found."""
    SIZE_AND_HASH = "Size and hash"
    SEARCH_TERM = "Search term"


@dataclass(frozen=True)
class CandidateGroup:
    """Snapshot of paths suspected to be duplicates of each other."""
    strategy: GroupStrategy
    key: str
    paths: Tuple[str, ...]
    # Terms to highlight when the group is listed
    search_terms: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.paths)
