#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data structures for file records in the File Catalog tool.
"""

import os
from dataclasses import dataclass, field
from typing import Tuple

from ..config import MB, TERM_DELIMITER


def path_to_search_terms(file_path: str) -> Tuple[str, ...]:
    """Split the base name of a path into lowercase search terms."""
    file_name = os.path.basename(file_path)
    return tuple(term.strip().lower() for term in file_name.split(TERM_DELIMITER))


@dataclass(frozen=True)
class FileRecord:
    """Immutable catalog entry for one file."""
    path: str
    size: int
    hash: str
    search_terms: Tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def create(cls, path: str, size: int, file_hash: str) -> 'FileRecord':
        """Build a record, deriving search terms from the path."""
        return cls(path=path, size=size, hash=file_hash,
                   search_terms=path_to_search_terms(path))

    @property
    def size_mb(self) -> int:
        """Size in whole megabytes, as shown in listings."""
        return self.size // MB

    def to_row(self) -> Tuple[str, int, str]:
        return (self.path, self.size, self.hash)
