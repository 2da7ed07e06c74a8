"""
Build the document tree from a directory walk.

Every eligible Markdown file becomes a document node; its ancestor directories
become directory nodes. Directories without eligible documents below them
never appear in the tree.
"""

import logging
import os
from pathlib import Path
from urllib.parse import quote

from mdtoc.exceptions import TreeWalkError
from mdtoc.models import TocNode
from mdtoc.titles import get_md_title

log = logging.getLogger(__name__)

MD_SUFFIX = ".md"
SKIP_NAMES = frozenset({"README.md"})

# Characters left as-is in an escaped path segment besides letters, digits and "_.-~".
_SEGMENT_SAFE = "$&+:=@"


def is_eligible(name: str) -> bool:
    """True for .md files other than README.md (both case-sensitive)."""
    return name not in SKIP_NAMES and name.endswith(MD_SUFFIX)


def escape_path(rel_path: str) -> str:
    """Percent-escape each segment of a "/"-separated relative path; separators are kept."""
    return "/".join(quote(segment, safe=_SEGMENT_SAFE) for segment in rel_path.split("/"))


def relative_md_path(file_path: str, root_dir: str) -> str:
    """Path of file_path relative to root_dir as "./a/b.md"."""
    rel = Path(os.path.relpath(file_path, root_dir)).as_posix()
    return f"./{rel}"


def default_root_title(root_dir: str | Path) -> str:
    """Base name of the scanned directory, symlinks not followed ("." is the working directory)."""
    return Path(os.path.abspath(root_dir)).name


def _raise_walk_error(err: OSError) -> None:
    raise TreeWalkError(err.filename or "", err.strerror or str(err)) from err


def _insert_document(root: TocNode, rel_path: str, file_path: str) -> TocNode:
    parts = rel_path.split("/")
    dirs, name = parts[1:-1], parts[-1]  # parts[0] is "."
    node = root
    joined = "."
    for d in dirs:
        joined = f"{joined}/{d}"
        child = node.children.get(d)
        if child is None or not child.is_dir:
            child = node.add_child(
                d,
                TocNode(
                    is_dir=True,
                    title=d,
                    depth=node.depth + 1,
                    link_target=escape_path(joined),
                    children={},
                ),
            )
            log.debug("dir  %s (depth %d)", joined, child.depth)
        node = child
    doc = TocNode(
        is_dir=False,
        title=get_md_title(file_path),
        depth=node.depth + 1,
        link_target=escape_path(rel_path),
    )
    if name in node.children:
        log.debug("Replacing existing entry %r under %s", name, node.link_target)
    log.debug("doc  %s (depth %d, title %r)", rel_path, doc.depth, doc.title)
    return node.add_child(name, doc)


def list_md_files(root_dir: str | Path) -> TocNode:
    """
    Walk root_dir and return the root node of the document tree.

    The root has depth 0 and an empty title; the caller assigns it (see
    default_root_title). Raises TreeWalkError if the root or any directory
    below it cannot be read.
    """
    root_dir = os.fspath(root_dir)
    root = TocNode.root()
    count = 0
    for dirpath, dirnames, filenames in os.walk(root_dir, onerror=_raise_walk_error):
        # Stable walk order; output order is decided by the renderer.
        dirnames.sort()
        for filename in sorted(filenames):
            if not is_eligible(filename):
                log.debug("skip %s", os.path.join(dirpath, filename))
                continue
            file_path = os.path.join(dirpath, filename)
            _insert_document(root, relative_md_path(file_path, root_dir), file_path)
            count += 1
    log.info("Found %d Markdown documents under %s", count, root_dir)
    return root
