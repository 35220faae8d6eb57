"""Filesystem access for the File Catalog tool."""

from .filesystem import LocalFileSystem

__all__ = ['LocalFileSystem']
