#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Interactive duplicate review command.
"""

import logging
from typing import Optional

from ..config import DEFAULT_SEARCH_MIN_LENGTH
from ..database.manager import CatalogStore
from ..resolver import DuplicateResolver

logger = logging.getLogger(__name__)


def cmd_duplicates(store: CatalogStore, min_length: int = DEFAULT_SEARCH_MIN_LENGTH,
                   resolver: Optional[DuplicateResolver] = None) -> int:
    """Review duplicate candidates, delete the chosen files, save the catalog."""
    store.load()

    resolver = resolver or DuplicateResolver(store.console, store.filesystem)
    summary = store.duplicates(resolver, min_length=min_length)

    store.write()

    logger.info("Reviewed %d group(s): %d deleted, %d failed, %d invalid selection(s)",
                summary.groups, summary.deleted, summary.failed, summary.invalid)
    return 0
