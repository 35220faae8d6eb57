"""Data models for the File Catalog tool."""

from .file_record import FileRecord, path_to_search_terms
from .group import CandidateGroup, GroupStrategy
from .reports import CatalogStats, ResolutionSummary, ScanReport

__all__ = [
    'FileRecord',
    'path_to_search_terms',
    'CandidateGroup',
    'GroupStrategy',
    'CatalogStats',
    'ResolutionSummary',
    'ScanReport',
]
