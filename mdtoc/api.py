"""
Public API: generate a table of contents from code.

    from mdtoc import generate_toc
    result = generate_toc("docs", title="Handbook")
    print(result.toc)
"""

import logging
from pathlib import Path

from mdtoc.models import TocResult
from mdtoc.render import DEFAULT_INDENT, create_toc_tree
from mdtoc.tree import default_root_title, list_md_files

log = logging.getLogger(__name__)


def generate_toc(
    directory: str | Path = ".",
    *,
    title: str | None = None,
    sort_asc: bool = True,
    indent: str = DEFAULT_INDENT,
) -> TocResult:
    """
    Scan directory and render its table of contents (library entry point).

    Args:
        directory: Root directory to scan.
        title: Root heading; when empty, the directory's base name is used.
        sort_asc: Sort siblings ascending by file name (False: descending).
        indent: Indent unit for nested list items.

    Returns:
        TocResult with the rendered text and document count.

    Raises:
        TreeWalkError: if the directory tree cannot be read.
    """
    directory = Path(directory)
    tree = list_md_files(directory)
    root_title = title or default_root_title(directory)
    tree = tree.with_title(root_title)
    toc = create_toc_tree(tree, indent=indent, sort_asc=sort_asc)
    count = sum(1 for _ in tree.iter_documents())
    log.info("Rendered %d documents under '%s'", count, root_title)
    return TocResult(
        toc=toc,
        title=root_title,
        directory=directory,
        document_count=count,
        message=f"Table of contents for {directory}: {count} documents",
    )


def write_toc(result: TocResult, out_path: str | Path) -> TocResult:
    """Write result.toc to out_path (UTF-8, written as-is) and return the result with out_path set."""
    out_path = Path(out_path)
    out_path.write_text(result.toc, encoding="utf-8")
    log.info("Wrote %s", out_path)
    return result.model_copy(update={"out_path": out_path})
