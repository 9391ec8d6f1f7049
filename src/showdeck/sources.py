"""Helpers for showing excerpts of real source files in code slides."""

import re
import textwrap
from pathlib import Path

ANCHOR_START_RE = re.compile(r"^[ \t]*(?:#|//)[ \t]*ANCHOR_START[^\n]*\n?", re.MULTILINE)
ANCHOR_END_RE = re.compile(r"^[ \t]*(?:#|//)[ \t]*ANCHOR_END", re.MULTILINE)


def anchored_range(source: str) -> str:
    """Return the lines between ANCHOR_START and ANCHOR_END marker comments.

    Markers may use ``#`` or ``//`` comments. Surrounding blank lines and the
    common indentation of the excerpt are removed.
    """
    start = ANCHOR_START_RE.search(source)
    if start is None:
        raise ValueError("missing ANCHOR_START marker")
    end = ANCHOR_END_RE.search(source, start.end())
    if end is None:
        raise ValueError("missing ANCHOR_END marker")
    excerpt = source[start.end():end.start()]
    return textwrap.dedent(excerpt).strip("\r\n").rstrip()


def read_anchored(path: str | Path) -> str:
    return anchored_range(Path(path).read_text())
