#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Filesystem access used by scans and duplicate deletion.
"""

import logging
import os
from typing import Set

logger = logging.getLogger(__name__)


class LocalFileSystem:
    """Enumerate, stat, read and delete files on the local disk."""

    def list_files(self, root: str) -> Set[str]:
        """Return every non-directory path below ``root``.

        A root that does not exist yields nothing. A root that exists but
        cannot be listed raises ``OSError``; unreadable subdirectories are
        logged and skipped.
        """
        if not os.path.lexists(root):
            logger.warning("Scan root %s does not exist", root)
            return set()

        if not os.path.isdir(root):
            return {root}

        found: Set[str] = set()
        with os.scandir(root) as entries:
            self._collect(entries, found)
        return found

    def _collect(self, entries, found: Set[str]) -> None:
        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False

            if not is_dir:
                found.add(entry.path)
                continue

            try:
                with os.scandir(entry.path) as children:
                    self._collect(children, found)
            except (PermissionError, OSError) as e:
                logger.warning("Unable to list directory %s: %s", entry.path, e)

    def file_size(self, path: str) -> int:
        return os.stat(path).st_size

    def read_prefix(self, path: str, n: int) -> bytes:
        """Return the first ``n`` bytes of the file (fewer if it is shorter)."""
        chunks = []
        remaining = n
        with open(path, 'rb') as f:
            while remaining > 0:
                chunk = f.read(remaining)
                if not chunk:
                    break
                chunks.append(chunk)
                remaining -= len(chunk)
        return b"".join(chunks)

    def delete_file(self, path: str) -> None:
        os.remove(path)
