"""
CLI entry point: generate a Markdown table of contents from the shell.

    mdtoc generate --dir docs -o docs/README.md -t "Handbook"
    mdtoc generate --desc               # print to stdout, descending order
    mdtoc config set indent "    "      # change defaults
"""

import logging
from pathlib import Path

import typer

from mdtoc.api import generate_toc, write_toc
from mdtoc.config import get_options
from mdtoc.exceptions import TreeWalkError
from mdtoc.tools.config import config_app

app = typer.Typer(
    name="mdtoc",
    help="Build a table of contents from a directory tree of Markdown files.",
)
app.add_typer(config_app, name="config")


@app.command("generate")
def generate(
    directory: Path | None = typer.Option(
        None,
        "--dir",
        "-d",
        help="Directory to scan (default from config, else '.')",
        path_type=Path,
    ),
    out: Path | None = typer.Option(
        None,
        "--out",
        "-o",
        help="Output file (default: stdout)",
        path_type=Path,
    ),
    title: str | None = typer.Option(
        None,
        "--title",
        "-t",
        help="Title of the TOC (default: name of the scanned directory)",
    ),
    sort_asc: bool | None = typer.Option(
        None,
        "--asc/--desc",
        help="Sort entries ascending (default) or descending by file name",
    ),
    indent: str | None = typer.Option(None, "--indent", help="Indent unit for nested items"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Print diagnostic info"),
) -> None:
    """Scan a directory for Markdown files and print or write the table of contents."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        options = get_options(
            directory=directory,
            out=out,
            title=title,
            sort_asc=sort_asc,
            indent=indent,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    try:
        result = generate_toc(
            options.directory,
            title=options.title,
            sort_asc=options.sort_asc,
            indent=options.indent,
        )
    except TreeWalkError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if options.out is None:
        typer.echo(result.toc)
        return
    try:
        result = write_toc(result, options.out)
    except OSError as e:
        typer.echo(f"Error: cannot write {options.out}: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(result.message, err=True)
    typer.echo(f"  toc → {result.out_path}", err=True)


def main() -> None:
    """Entry point for the mdtoc console script."""
    app()


if __name__ == "__main__":
    main()
