#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Global configuration and constants for the File Catalog tool.
"""

# Catalog file used when --catalog is not given
DEFAULT_CATALOG_FILE = "file_catalog.csv"

# Sizes
MB = 1024 * 1024
SAMPLE_SIZE_BYTES = 1 * MB  # prefix hashed per file

# Search term tokenization
TERM_DELIMITER = "-"
TERM_BUCKET_WIDTH = 5  # stats histogram bucket width

# Search modes
MODE_FAST = "fast"  # exact term lookup
MODE_SLOW = "slow"  # substring match against every term
SEARCH_MODES = (MODE_FAST, MODE_SLOW)
DEFAULT_SEARCH_MODE = MODE_SLOW

# Display / grouping defaults (can be overridden by CLI)
MAX_RESULTS = 100
DEFAULT_SEARCH_MIN_LENGTH = 15
