#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for term search in exact and substring mode.
"""

import sys
from pathlib import Path

import pytest

# Add the tests directory and the project root to Python path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from file_catalog.commands.search import cmd_file_search, cmd_term_search
from file_catalog.config import MODE_FAST, MODE_SLOW
from file_catalog.database.index import RecordIndex
from file_catalog.database.manager import CatalogStore
from file_catalog.models.file_record import FileRecord
from file_catalog.search import SearchEngine, intersect_all
from fixtures.catalog_setup import (RecordingConsole, SEARCH_FILES, catalog_rows,
                                    create_catalog_file)


class TestSearchFixture:
    """Catalog file holding the four search fixture records."""

    @pytest.fixture
    def console(self):
        return RecordingConsole()

    @pytest.fixture
    def store(self, tmp_path, console):
        catalog_path = create_catalog_file(tmp_path, catalog_rows(SEARCH_FILES))
        return CatalogStore(catalog_path, console=console)


class TestTermSearchCommand(TestSearchFixture):

    def test_fast_search_exact_term(self, store, console):
        assert cmd_term_search(store, ["1786396036.txt"], mode=MODE_FAST) == 0

        plain = console.plain()
        assert SEARCH_FILES[1] in plain[0]
        assert SEARCH_FILES[3] in plain[1]
        assert len(plain) == 2

    def test_fast_search_needs_whole_term(self, store, console):
        cmd_term_search(store, ["1786396036"], mode=MODE_FAST)

        assert console.lines == ["No results found for needle '1786396036'"]

    def test_slow_search_unknown_term(self, store, console):
        cmd_term_search(store, ["abcde"], mode=MODE_SLOW)

        assert console.lines == ["No results found for needle 'abcde'"]

    def test_slow_search_substring(self, store, console):
        cmd_term_search(store, ["1786396036"], mode=MODE_SLOW)

        plain = console.plain()
        assert SEARCH_FILES[1] in plain[0]
        assert SEARCH_FILES[3] in plain[1]

    def test_slow_search_multiple_terms(self, store, console):
        cmd_term_search(store, ["bar", "1786396036"], mode=MODE_SLOW)

        plain = console.plain()
        assert SEARCH_FILES[1] in plain[0]
        assert console.get(1) == ""

    def test_slow_search_is_case_insensitive(self, store, console):
        cmd_term_search(store, ["BAR"], mode=MODE_SLOW)

        assert SEARCH_FILES[1] in console.plain()[0]

    def test_terms_without_common_record(self, store, console):
        cmd_term_search(store, ["foo", "quix"], mode=MODE_SLOW)

        assert console.lines == ["No results found."]

    def test_listing_shows_size_in_mb(self, store, console):
        cmd_term_search(store, ["quix"], mode=MODE_FAST)

        assert console.plain() == [f"[1] {SEARCH_FILES[3]} (0 MB)"]


class TestFileSearchCommand(TestSearchFixture):

    def test_file_search_uses_name_terms(self, store, console):
        assert cmd_file_search(store, SEARCH_FILES[1], mode=MODE_SLOW) == 0

        plain = console.plain()
        assert SEARCH_FILES[1] in plain[0]
        assert console.get(1) == ""

    def test_file_search_ignores_directories(self, store, console):
        cmd_file_search(store, "/elsewhere/quix-1786396036.txt", mode=MODE_FAST)

        assert SEARCH_FILES[3] in console.plain()[0]
        assert len(console.lines) == 1


class TestSearchEngine:

    @pytest.fixture
    def index(self):
        index = RecordIndex()
        for i in range(150):
            index.insert(FileRecord.create(f"d/item-{i:03d}.txt", i, f"h{i}"))
        return index

    def test_results_are_sorted_and_capped(self, index):
        result = SearchEngine(index, limit=100).search(["item"], MODE_FAST)

        assert result.total == 150
        assert len(result.records) == 100
        assert result.truncated
        assert result.records[0].path == "d/item-000.txt"
        assert result.records[-1].path == "d/item-099.txt"

    def test_exactly_limit_is_not_truncated(self, index):
        result = SearchEngine(index, limit=150).search(["item"], MODE_FAST)

        assert len(result.records) == 150
        assert not result.truncated

    def test_truncation_notice(self, index, tmp_path):
        console = RecordingConsole()
        store = CatalogStore(tmp_path / "catalog.csv", console=console)
        store.index = index
        store.load = lambda missing_ok=False: 0

        cmd_term_search(store, ["item"], mode=MODE_FAST, limit=3)

        assert len(console.lines) == 4
        assert console.lines[-1] == "... (truncated)"

    def test_unknown_mode(self, index):
        with pytest.raises(ValueError):
            SearchEngine(index).search(["item"], "medium")

    def test_intersect_all(self):
        assert intersect_all([{"a", "b"}, {"b", "c"}]) == {"b"}
        assert intersect_all([{"a"}, {"b"}, {"a"}]) == set()
        assert intersect_all([]) == set()
