#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for reading and writing the CSV catalog.
"""

import sys
from pathlib import Path

import pytest

# Add the tests directory and the project root to Python path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from file_catalog.database.codec import decode_rows, encode_records, read_catalog, write_catalog
from file_catalog.errors import CatalogLoadError, CatalogWriteError
from file_catalog.models.file_record import FileRecord
from fixtures.catalog_setup import create_catalog_file


class TestDecodeRows:
    """Row decoding and tolerance of bad rows."""

    def test_decodes_triples(self):
        rows = [["a/b.txt", "12", "abc"], ["c.txt", "0", "def"]]
        assert decode_rows(rows) == [("a/b.txt", 12, "abc"), ("c.txt", 0, "def")]

    def test_skips_unparseable_size(self, caplog):
        rows = [["a.txt", "twelve", "abc"], ["b.txt", "3", "def"]]

        decoded = decode_rows(rows)

        assert decoded == [("b.txt", 3, "def")]
        assert "Unable to parse size" in caplog.text

    def test_skips_wrong_field_count_and_blank_rows(self):
        rows = [[], ["only-path"], ["a.txt", "1", "h", "extra"], ["b.txt", "2", "h2"]]
        assert decode_rows(rows) == [("b.txt", 2, "h2")]


class TestEncodeRecords:

    def test_one_row_per_record_sorted_by_path(self):
        records = [FileRecord.create("z.txt", 5, "h1"), FileRecord.create("a.txt", 7, "h2")]
        assert encode_records(records) == [["a.txt", "7", "h2"], ["z.txt", "5", "h1"]]

    def test_round_trip_through_file(self, tmp_path):
        records = [
            FileRecord.create("plain/file.txt", 10, "aa"),
            FileRecord.create('odd, "quoted" name.txt', 20, "bb"),
            FileRecord.create("line\nbreak.txt", 30, "cc"),
        ]
        catalog_path = tmp_path / "catalog.csv"

        write_catalog(catalog_path, encode_records(records))
        decoded = decode_rows(read_catalog(catalog_path))

        assert set(decoded) == {r.to_row() for r in records}


class TestCatalogFile:

    def test_missing_file_is_an_error(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            read_catalog(tmp_path / "nope.csv")

    def test_missing_file_allowed(self, tmp_path):
        assert read_catalog(tmp_path / "nope.csv", missing_ok=True) == []

    def test_malformed_csv_is_an_error(self, tmp_path):
        catalog_path = tmp_path / "broken.csv"
        catalog_path.write_text('"a"b,1,2\n', encoding='utf-8')

        with pytest.raises(CatalogLoadError):
            read_catalog(catalog_path)

    def test_write_replaces_existing_file(self, tmp_path):
        catalog_path = create_catalog_file(tmp_path, [["old.txt", "1", "x"]])

        write_catalog(catalog_path, [["new.txt", "2", "y"]])

        assert read_catalog(catalog_path) == [["new.txt", "2", "y"]]
        assert [p.name for p in tmp_path.iterdir()] == ["catalog.csv"]

    def test_write_creates_parent_directory(self, tmp_path):
        catalog_path = tmp_path / "nested" / "dir" / "catalog.csv"

        write_catalog(catalog_path, [])

        assert catalog_path.exists()
        assert catalog_path.read_text() == ""

    def test_undecodable_file_name_round_trips(self, tmp_path):
        # How os.scandir reports the name bytes b"caf\xe9-photo.jpg"
        path = "/data/caf\udce9-photo.jpg"
        catalog_path = tmp_path / "catalog.csv"

        write_catalog(catalog_path, [[path, "1", "h"]])

        assert read_catalog(catalog_path) == [[path, "1", "h"]]
        assert b"caf\xe9-photo.jpg" in catalog_path.read_bytes()

    def test_unencodable_row_keeps_old_catalog(self, tmp_path):
        catalog_path = create_catalog_file(tmp_path, [["old.txt", "1", "x"]])

        with pytest.raises(CatalogWriteError):
            write_catalog(catalog_path, [["bad-\ud800.txt", "2", "y"]])

        assert read_catalog(catalog_path) == [["old.txt", "1", "x"]]
        assert [p.name for p in tmp_path.iterdir()] == ["catalog.csv"]

    def test_interrupted_write_removes_temp_file(self, tmp_path):
        catalog_path = tmp_path / "catalog.csv"

        def rows():
            yield ["a.txt", "1", "h"]
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            write_catalog(catalog_path, rows())

        assert list(tmp_path.iterdir()) == []
