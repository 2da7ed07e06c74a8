"""Data models for the document tree, generation options and results."""

from pathlib import Path
from typing import Iterator

from pydantic import BaseModel, Field


class TocNode(BaseModel):
    """One entry (directory or document) in the table-of-contents tree."""

    is_dir: bool = Field(description="True for directories, False for documents")
    title: str = Field(default="", description="First H1 of the document, or the directory name")
    depth: int = Field(ge=0, description="Distance from the root; root is 0")
    link_target: str = Field(default=".", description="URL-escaped relative path starting with ./")
    children: dict[str, "TocNode"] | None = Field(
        default=None,
        description="Child nodes keyed by raw file/directory name (directories only)",
    )

    model_config = {"frozen": True}

    @classmethod
    def root(cls, title: str = "") -> "TocNode":
        """Return an empty root directory node."""
        return cls(is_dir=True, title=title, depth=0, link_target=".", children={})

    def add_child(self, name: str, child: "TocNode") -> "TocNode":
        """
        Insert child under name and return it. An existing entry with the same
        name is replaced (last write wins).
        """
        if self.children is None:
            raise ValueError(f"Cannot add '{name}' to document node {self.link_target}")
        if child.depth != self.depth + 1:
            raise ValueError(
                f"Child '{name}' has depth {child.depth}, expected {self.depth + 1}"
            )
        self.children[name] = child
        return child

    def with_title(self, title: str) -> "TocNode":
        """Copy of this node with another title; children are shared."""
        return self.model_copy(update={"title": title})

    def iter_documents(self) -> Iterator["TocNode"]:
        for child in (self.children or {}).values():
            if child.is_dir:
                yield from child.iter_documents()
            else:
                yield child


class TocOptions(BaseModel):
    """Options for one table-of-contents run."""

    directory: Path = Field(default=Path("."), description="Root directory to scan")
    out: Path | None = Field(default=None, description="Output file; stdout when None")
    title: str | None = Field(
        default=None,
        description="Root heading (default: base name of the scanned directory)",
    )
    sort_asc: bool = Field(default=True, description="Sort siblings ascending (False: descending)")
    indent: str = Field(default="  ", description="Indent unit for nested list items")

    model_config = {"arbitrary_types_allowed": True}


class TocResult(BaseModel):
    """Result of a table-of-contents run."""

    toc: str = Field(description="Rendered outline text")
    title: str = Field(description="Root heading used")
    directory: Path = Field(description="Directory that was scanned")
    document_count: int = Field(default=0, description="Number of documents in the tree")
    out_path: Path | None = Field(default=None, description="File the outline was written to, if any")
    message: str = Field(default="", description="Human-readable summary")

    model_config = {"arbitrary_types_allowed": True}
