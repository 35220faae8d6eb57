#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exception types raised by the File Catalog tool.
"""


class CatalogError(Exception):
    """Base class for all catalog failures."""


class CatalogLoadError(CatalogError):
    """The catalog file could not be read or parsed."""


class CatalogWriteError(CatalogError):
    """The catalog file could not be written."""


class ScanError(CatalogError):
    """A scan root could not be enumerated."""


class DuplicateRecordError(CatalogError):
    """A record was added for a path that is already cataloged."""

    def __init__(self, path: str):
        super().__init__(f"path already cataloged: {path}")
        self.path = path
