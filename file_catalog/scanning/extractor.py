#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Feature extraction for the File Catalog tool.
"""

import hashlib
import logging
from typing import Optional

from ..config import SAMPLE_SIZE_BYTES
from ..models.file_record import FileRecord
from ..storage.filesystem import LocalFileSystem

logger = logging.getLogger(__name__)


class FeatureExtractor:
    """Computes size and prefix digest for newly discovered files."""

    def __init__(self, filesystem: Optional[LocalFileSystem] = None,
                 sample_size: int = SAMPLE_SIZE_BYTES):
        self.filesystem = filesystem or LocalFileSystem()
        self.sample_size = sample_size

    def extract_features(self, path: str) -> Optional[FileRecord]:
        """Build a record for ``path``, or None if the file cannot be read."""
        try:
            size = self.filesystem.file_size(path)
        except OSError as e:
            logger.warning("Unable to stat file %s: %s", path, e)
            return None

        try:
            file_hash = self.compute_hash(path, size)
        except OSError as e:
            logger.warning("Unable to hash file %s: %s", path, e)
            return None

        return FileRecord.create(path, size, file_hash)

    def compute_hash(self, path: str, size: int) -> str:
        """MD5 over the first ``sample_size`` bytes (whole file if smaller)."""
        data = self.filesystem.read_prefix(path, min(size, self.sample_size))
        return hashlib.md5(data).hexdigest()
