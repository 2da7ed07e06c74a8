"""CLI subapps: one module per tool."""

from mdtoc.tools.config import config_app

__all__ = ["config_app"]
