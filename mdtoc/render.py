"""Render a document tree as a Markdown table of contents."""

from mdtoc.models import TocNode

DEFAULT_INDENT = "  "


def sorted_child_keys(node: TocNode, sort_asc: bool = True) -> list[str]:
    """Child names of node sorted by raw name (not title), ascending or descending."""
    return sorted(node.children or {}, reverse=not sort_asc)


def _format_node(node: TocNode, indent: str) -> str:
    if node.depth == 0:
        return f"# {node.title}\n"
    if node.depth == 1:
        if node.is_dir:
            return f"\n## {node.title}\n\n"
        return f"\n## [{node.title}]({node.link_target})\n\n"
    prefix = indent * (node.depth - 2)
    if node.is_dir:
        return f"{prefix}- {node.title}\n"
    return f"{prefix}- [{node.title}]({node.link_target})\n"


def create_toc_tree(node: TocNode, indent: str = DEFAULT_INDENT, sort_asc: bool = True) -> str:
    """
    Render node and its descendants depth-first.

    - depth 0: ``# Title``
    - depth 1: ``## Name`` for directories, ``## [Title](target)`` for documents,
      each surrounded by blank lines
    - depth >= 2: list items indented by (depth - 2) indent units

    Siblings are ordered by their raw file names.
    """
    parts = [_format_node(node, indent)]
    for key in sorted_child_keys(node, sort_asc):
        parts.append(create_toc_tree(node.children[key], indent, sort_asc))
    return "".join(parts)
