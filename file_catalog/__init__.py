"""File Catalog - index files under directory roots and find duplicates."""

__version__ = "1.0.0"
__author__ = "File Catalog Team"

# Import key classes for convenient top-level access
from .database.manager import CatalogStore
from .database.index import RecordIndex
from .search import SearchEngine, SearchResult
from .resolver import DuplicateResolver
from .highlight import find_highlights
from .models import FileRecord, CandidateGroup, GroupStrategy, ScanReport, CatalogStats
from .storage import LocalFileSystem
from .utils import Console, ReadWriteLock

__all__ = [
    # Core classes
    'CatalogStore',
    'RecordIndex',
    'SearchEngine',
    'SearchResult',
    'DuplicateResolver',

    # Collaborators
    'LocalFileSystem',
    'Console',
    'ReadWriteLock',

    # Data models
    'FileRecord',
    'CandidateGroup',
    'GroupStrategy',
    'ScanReport',
    'CatalogStats',

    # Utilities
    'find_highlights',

    # Package metadata
    '__version__',
    '__author__'
]
