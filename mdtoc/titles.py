"""
Title extraction: a document's title is its first H1 heading.

Only lines of the form ``# Title`` count. ``## Sub`` and indented ``  # x``
do not match. No other Markdown is parsed.
"""

import logging
import re
from pathlib import Path
from typing import Iterable

log = logging.getLogger(__name__)

# Exactly one "#", ASCII whitespace only (no NBSP or \v), then the title text.
H1_RE = re.compile(r"^#[\t\n\f\r ]+(.*)$")


def _decode_line(line: bytes | str) -> str:
    if isinstance(line, bytes):
        line = line.decode("utf-8", errors="replace")
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def extract_title(lines: Iterable[bytes | str]) -> str:
    """
    Return the text of the first H1 heading in lines, or "" if there is none.

    lines may be an open file (binary or text) or any iterable of lines.
    Scanning stops at the first match.
    """
    for raw in lines:
        m = H1_RE.match(_decode_line(raw))
        if m:
            return m.group(1)
    return ""


def get_md_title(file_path: str | Path) -> str:
    """
    Read the title of a Markdown file. An unreadable file has no title: read
    errors are logged and "" is returned.
    """
    try:
        # Binary mode: lines split on \n only, as the heading pattern expects.
        with open(file_path, "rb") as f:
            return extract_title(f)
    except OSError as e:
        log.warning("Cannot read title from %s: %s", file_path, e)
        return ""
