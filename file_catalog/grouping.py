#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Duplicate candidate grouping over the record index.
"""

from itertools import groupby
from typing import List

from .config import DEFAULT_SEARCH_MIN_LENGTH
from .database.index import RecordIndex
from .models.group import CandidateGroup, GroupStrategy


def group_by_size_and_hash(index: RecordIndex) -> List[CandidateGroup]:
    """Records sharing a hash, split further by size."""
    def size_of(path):
        return index.records[path].size

    groups = []
    for file_hash in sorted(index.by_hash):
        paths = index.by_hash[file_hash]
        if len(paths) < 2:
            continue

        members = sorted(paths, key=lambda p: (size_of(p), p))
        for size, bucket in groupby(members, key=size_of):
            groups.append(CandidateGroup(
                strategy=GroupStrategy.SIZE_AND_HASH,
                key=f"{file_hash}-{size}",
                paths=tuple(bucket),
            ))

    return groups


def group_by_search_term(index: RecordIndex,
                         min_length: int = DEFAULT_SEARCH_MIN_LENGTH) -> List[CandidateGroup]:
    """Records sharing a search term of at least ``min_length`` characters."""
    groups = []
    for term in sorted(index.by_search_term):
        paths = index.by_search_term[term]
        if len(paths) < 2 or len(term) < min_length:
            continue

        groups.append(CandidateGroup(
            strategy=GroupStrategy.SEARCH_TERM,
            key=term,
            paths=tuple(sorted(paths)),
            search_terms=(term,),
        ))

    return groups
