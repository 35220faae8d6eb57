#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for duplicate candidate grouping.
"""

import sys
from pathlib import Path

import pytest

# Add the tests directory and the project root to Python path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from file_catalog.database.index import RecordIndex
from file_catalog.grouping import group_by_search_term, group_by_size_and_hash
from file_catalog.models.file_record import FileRecord
from file_catalog.models.group import GroupStrategy


def build_index(entries):
    index = RecordIndex()
    for path, size, file_hash in entries:
        index.insert(FileRecord.create(path, size, file_hash))
    return index


class TestSizeAndHash:

    def test_same_hash_same_size(self):
        index = build_index([("b.txt", 10, "h"), ("a.txt", 10, "h"), ("c.txt", 10, "other")])

        groups = group_by_size_and_hash(index)

        assert len(groups) == 1
        assert groups[0].strategy is GroupStrategy.SIZE_AND_HASH
        assert groups[0].paths == ("a.txt", "b.txt")
        assert groups[0].key == "h-10"
        assert groups[0].search_terms == ()

    def test_same_hash_different_sizes_are_split(self):
        # Large files sharing their first sample differ only in size.
        index = build_index([
            ("a", 100, "h"), ("b", 100, "h"),
            ("c", 200, "h"), ("d", 200, "h"),
            ("e", 300, "h"),
        ])

        groups = group_by_size_and_hash(index)

        assert [g.paths for g in groups] == [("a", "b"), ("c", "d"), ("e",)]

    def test_unique_hashes_produce_nothing(self):
        index = build_index([("a", 1, "h1"), ("b", 1, "h2")])

        assert group_by_size_and_hash(index) == []


class TestSearchTerm:

    @pytest.fixture
    def index(self):
        return build_index([
            ("x/holiday-2019-beach.jpg", 1, "h1"),
            ("y/holiday-2019-beach.jpg", 2, "h2"),
            ("z/holiday-2020.jpg", 3, "h3"),
        ])

    def test_shared_terms_meeting_min_length(self, index):
        groups = group_by_search_term(index, min_length=7)

        assert [g.key for g in groups] == ["holiday"]
        assert groups[0].paths == ("x/holiday-2019-beach.jpg", "y/holiday-2019-beach.jpg",
                                   "z/holiday-2020.jpg")
        assert groups[0].search_terms == ("holiday",)
        assert groups[0].strategy is GroupStrategy.SEARCH_TERM

    def test_groups_in_term_order(self, index):
        groups = group_by_search_term(index, min_length=1)

        assert [g.key for g in groups] == ["2019", "beach.jpg", "holiday"]
        assert all(len(g) >= 2 for g in groups)

    def test_long_min_length_excludes_everything(self, index):
        assert group_by_search_term(index, min_length=15) == []
