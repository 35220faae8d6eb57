#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Scan command: reconcile the catalog with one or more directory trees.
"""

import logging
from typing import Sequence

from ..database.manager import CatalogStore
from ..jsonio import success

logger = logging.getLogger(__name__)


def cmd_scan_dirs(store: CatalogStore, roots: Sequence[str], as_json: bool = False) -> int:
    """Scan ``roots`` in order and write the updated catalog.

    A missing catalog file is treated as an empty catalog so the first scan
    can create it.
    """
    store.load(missing_ok=True)

    reports = store.scan(roots)
    store.write()

    for report in reports:
        if report.failed:
            logger.warning("%d file(s) under %s could not be read and were skipped",
                           report.failed, report.root)

    if as_json:
        return success("scan-dir", {
            "catalog": str(store.catalog_path),
            "roots": [report.to_dict() for report in reports],
            "total_records": len(store),
        })
    return 0
