"""
Config tool: CLI subapp only. Implementation in mdtoc.config.
"""

import typer

from mdtoc import config as config_module

config_app = typer.Typer(help="Defaults for generate (directory, output file, title, sort order, indent).")


@config_app.command("show")
def _show() -> None:
    """Show config file and current default values."""
    data = config_module.load_config()
    cf = data.get("_config_file", "")
    if data.get("_no_file"):
        typer.echo(f"Config file: {cf} (not found; using defaults)")
    elif data.get("_load_error"):
        typer.echo(f"Config file: {cf} (unreadable; using defaults)")
    else:
        typer.echo(f"Config file: {cf}")
    for key in config_module.OPTION_KEYS:
        typer.echo(f"{key}: {data.get(key)!r}")


@config_app.command("set")
def _set(
    key: str = typer.Argument(..., help=f"Config key: {', '.join(config_module.OPTION_KEYS)}"),
    value: str = typer.Argument(..., help="New value (out/title: 'none' to clear; sort_asc: true/false)"),
) -> None:
    """Set a default value and save the config file."""
    result = config_module.set_option(key, value)
    if not result["ok"]:
        typer.echo(result["error"], err=True)
        raise typer.Exit(1)
    typer.echo(f"{key} set to: {result['config'].get(key)!r}")


@config_app.command("path")
def _path() -> None:
    """Print the config file path in use."""
    typer.echo(config_module.get_config_path())
