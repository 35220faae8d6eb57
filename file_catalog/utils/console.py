#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Line-oriented console used for results and interactive prompts.
"""

import sys
from typing import Optional, TextIO


def printable(text: str) -> str:
    """Replace surrogate-escaped bytes with \\xNN escapes."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


class Console:
    """Writes result lines and reads answers, one line at a time."""

    def __init__(self, out: Optional[TextIO] = None, inp: Optional[TextIO] = None):
        self.out = out or sys.stdout
        self.inp = inp or sys.stdin

    def write(self, line: str = "") -> None:
        try:
            print(line, file=self.out, flush=True)
        except UnicodeEncodeError:
            # Undecodable file name bytes, show them escaped
            print(printable(line), file=self.out, flush=True)

    def read_line(self) -> str:
        """Return the next input line without its newline, or "" at end of input."""
        line = self.inp.readline()
        return line.rstrip("\r\n")
