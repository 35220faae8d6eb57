#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Highlighting of matched search terms in file paths.
"""

import re
from typing import Iterable, List, Sequence, Tuple

from .models.file_record import FileRecord

STRONG = "\033[1m\033[31m"
NO_MATCH = "\033[1m\033[33m"
AMBIGUOUS = "\033[1m\033[43m"
RESET = "\033[0m"


def find_highlights(haystack: str, needles: Iterable[str]) -> str:
    """Wrap the first case-insensitive match of each needle in ``haystack``.

    Overlapping matches are not split up: the whole string is marked as
    ambiguous instead. A string without any match is marked as such.
    """
    spans: List[Tuple[int, int]] = []
    for needle in needles:
        if not needle:
            continue
        match = re.search(re.escape(needle), haystack, re.IGNORECASE)
        if match is None:
            continue
        spans.append(match.span())

    spans.sort(key=lambda span: span[0])

    parts = []
    pos = 0
    for start, end in spans:
        # Ranges overlap, give up on highlighting individual terms.
        if pos > 0 and pos > start:
            return AMBIGUOUS + haystack + RESET

        parts.append(haystack[pos:start])
        parts.append(STRONG + haystack[start:end] + RESET)
        pos = end

    if pos < len(haystack):
        parts.append(haystack[pos:])

    if len(parts) <= 1:
        return NO_MATCH + haystack + RESET

    return "".join(parts)


def render_listing(records: Sequence[FileRecord], search_terms: Iterable[str]) -> List[str]:
    """Numbered, highlighted lines for a list of records."""
    terms = list(search_terms)
    return [
        f"[{i}] {find_highlights(record.path, terms)} ({record.size_mb} MB)"
        for i, record in enumerate(records, start=1)
    ]
