"""Catalog storage for the File Catalog tool."""

from .codec import decode_rows, encode_records, read_catalog, write_catalog
from .index import RecordIndex

__all__ = [
    'RecordIndex',
    'decode_rows',
    'encode_records',
    'read_catalog',
    'write_catalog',
]
