#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CSV persistence for the catalog.

One record per row, ``path,size,hash``, no header. Search terms are never
stored; they are derived from the path again on load.
"""

import csv
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from ..errors import CatalogLoadError, CatalogWriteError
from ..models.file_record import FileRecord
from ..utils.path import ensure_dir

logger = logging.getLogger(__name__)

FIELD_COUNT = 3

# os.scandir hands out undecodable name bytes as lone surrogates
PATH_ERRORS = "surrogateescape"


def read_catalog(catalog_path: Path, missing_ok: bool = False) -> List[List[str]]:
    """Read raw CSV rows from the catalog file."""
    catalog_path = Path(catalog_path)
    if missing_ok and not catalog_path.exists():
        logger.info("Catalog %s does not exist yet, starting empty", catalog_path)
        return []

    try:
        with catalog_path.open('r', newline='', encoding='utf-8', errors=PATH_ERRORS) as f:
            return list(csv.reader(f, strict=True))
    except OSError as e:
        raise CatalogLoadError(f"unable to read catalog file '{catalog_path}': {e}") from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise CatalogLoadError(f"unable to parse catalog file '{catalog_path}' as CSV: {e}") from e


def decode_rows(rows: Iterable[Sequence[str]]) -> List[Tuple[str, int, str]]:
    """Turn raw rows into ``(path, size, hash)`` triples, skipping bad rows."""
    decoded = []
    for line_no, row in enumerate(rows, start=1):
        if not row:
            continue

        if len(row) != FIELD_COUNT:
            logger.warning("Skipping row %d: expected %d fields, got %d: %r",
                           line_no, FIELD_COUNT, len(row), row)
            continue

        path, raw_size, file_hash = row
        try:
            size = int(raw_size)
        except ValueError:
            logger.warning("Unable to parse size from record. File path: %s, raw data: %r",
                           path, raw_size)
            continue

        decoded.append((path, size, file_hash))

    return decoded


def encode_records(records: Iterable[FileRecord]) -> List[List[str]]:
    """Encode records as CSV rows, sorted by path."""
    return [
        [record.path, str(record.size), record.hash]
        for record in sorted(records, key=lambda r: r.path)
    ]


def write_catalog(catalog_path: Path, rows: Iterable[Sequence[str]]) -> None:
    """Replace the catalog file with ``rows``.

    The rows go to a temporary file next to the catalog which is then moved
    over it, so the old catalog stays intact if writing fails. File names that
    are not valid UTF-8 are written back as their original bytes.
    """
    catalog_path = Path(catalog_path)
    ensure_dir(catalog_path.parent)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{catalog_path.name}.", suffix=".tmp",
                                    dir=str(catalog_path.parent))
    try:
        with os.fdopen(fd, 'w', newline='', encoding='utf-8', errors=PATH_ERRORS) as f:
            writer = csv.writer(f)
            writer.writerows(rows)
        os.replace(tmp_name, catalog_path)
    except (OSError, UnicodeError) as e:
        _discard_temp(tmp_name)
        raise CatalogWriteError(f"unable to write catalog file '{catalog_path}': {e}") from e
    except BaseException:
        _discard_temp(tmp_name)
        raise


def _discard_temp(tmp_name: str) -> None:
    try:
        os.unlink(tmp_name)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Unable to remove temporary file %s: %s", tmp_name, e)
