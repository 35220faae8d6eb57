#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Interactive confirm-and-delete loop over duplicate candidate groups.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .highlight import render_listing
from .models.group import CandidateGroup, GroupStrategy
from .models.reports import ResolutionSummary
from .storage.filesystem import LocalFileSystem
from .utils.console import Console

logger = logging.getLogger(__name__)

PROMPT = "Delete any files? (comma separated list of numbers)"


def parse_selection(answer: str, count: int) -> Tuple[List[int], List[str]]:
    """Split a comma separated answer into valid 1-based indices and rejects."""
    indices: List[int] = []
    rejected: List[str] = []
    for token in answer.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            index = int(token)
        except ValueError:
            rejected.append(token)
            continue
        if index < 1 or index > count:
            rejected.append(token)
            continue
        indices.append(index)
    return indices, rejected


class DuplicateResolver:
    """Shows each candidate group and deletes the files the user picks."""

    def __init__(self, console: Optional[Console] = None,
                 filesystem: Optional[LocalFileSystem] = None):
        self.console = console or Console()
        self.filesystem = filesystem or LocalFileSystem()

    def resolve(self, store, groups: Sequence[CandidateGroup]) -> ResolutionSummary:
        """Walk ``groups`` in order, applying deletions to ``store`` by path."""
        summary = ResolutionSummary()
        total = len(groups)

        for position, group in enumerate(groups, start=1):
            records = [store.get(path) for path in group.paths]
            records = [record for record in records if record is not None]
            if not records:
                logger.debug("Skipping group %s, all members already deleted", group.key)
                continue
            if group.strategy is GroupStrategy.SEARCH_TERM and len(records) < 2:
                logger.debug("Skipping group %s, only one member left", group.key)
                continue

            summary.groups += 1
            self.console.write(
                f"Duplicates found: {len(records)} ({position} / {total}) - {group.strategy.value}"
            )
            for line in render_listing(records, group.search_terms):
                self.console.write(line)
            self.console.write(PROMPT)

            answer = self.console.read_line()
            if not answer.strip():
                continue

            indices, rejected = parse_selection(answer, len(records))
            for token in rejected:
                self.console.write(f"Invalid selection: {token}, skipping...")
            summary.invalid += len(rejected)

            for index in indices:
                if self.delete(store, records[index - 1].path):
                    summary.deleted += 1
                else:
                    summary.failed += 1

            self.console.write()

        return summary

    def delete(self, store, path: str) -> bool:
        """Drop ``path`` from the catalog and remove the file from disk."""
        if store.remove(path) is None:
            self.console.write(f"Already deleted: {path}, skipping...")
            return False

        self.console.write(f"Deleting {path}")
        try:
            self.filesystem.delete_file(path)
        except OSError as e:
            self.console.write(f"Unable to delete file: {path}, err: {e}")
            return False

        return True
