"""
mdtoc: build a Markdown table of contents from a directory of Markdown files.

Use as a library:

    from mdtoc import generate_toc
    result = generate_toc("docs", title="Handbook")
    print(result.toc)

Or run the CLI:

    mdtoc generate --dir docs -o docs/README.md
"""

from mdtoc.api import generate_toc, write_toc
from mdtoc.exceptions import MdtocError, TreeWalkError
from mdtoc.models import TocNode, TocOptions, TocResult
from mdtoc.render import create_toc_tree
from mdtoc.titles import extract_title, get_md_title
from mdtoc.tree import list_md_files

__all__ = [
    "generate_toc",
    "write_toc",
    "create_toc_tree",
    "extract_title",
    "get_md_title",
    "list_md_files",
    "MdtocError",
    "TreeWalkError",
    "TocNode",
    "TocOptions",
    "TocResult",
]
