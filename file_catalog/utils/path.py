#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Path utility functions for the File Catalog tool.
"""

import os
from pathlib import Path


def ensure_dir(p: Path) -> None:
    """Ensure directory exists, creating it if necessary."""
    p.mkdir(parents=True, exist_ok=True)


def is_under_root(path: str, root: str) -> bool:
    """Return True if ``path`` is ``root`` itself or lies below it.

    The test works on whole path segments: ``/data/photos2/a.jpg`` is not
    under ``/data/photos`` even though the strings share a prefix.
    """
    if path == root:
        return True

    prefix = root
    if not prefix.endswith(os.sep) and not (os.altsep and prefix.endswith(os.altsep)):
        prefix += os.sep

    return path.startswith(prefix)
