"""Utility functions for the File Catalog tool."""

from .console import Console
from .locks import ReadWriteLock
from .path import ensure_dir, is_under_root

__all__ = ['Console', 'ReadWriteLock', 'ensure_dir', 'is_under_root']
