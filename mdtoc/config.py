"""
Config: defaults for the generate command, stored in .mdtoc.json.
Lookup order: env MDTOC_CONFIG, then cwd and its parents, then the repo root.
Explicit CLI options always win over config values.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from mdtoc.models import TocOptions

CONFIG_FILENAME = ".mdtoc.json"
CONFIG_ENV = "MDTOC_CONFIG"

# Config key -> TocOptions field
OPTION_KEYS = {
    "dir": "directory",
    "out": "out",
    "title": "title",
    "sort_asc": "sort_asc",
    "indent": "indent",
}

_TRUE = {"true", "yes", "1", "on"}
_FALSE = {"false", "no", "0", "off"}
_CLEAR = {"", "none", "null"}


def _find_repo_root() -> Path | None:
    """Walk up from package dir to find a directory containing pyproject.toml or .mdtoc.json."""
    start = Path(__file__).resolve().parent
    for parent in [start, *start.parents]:
        if (parent / "pyproject.toml").exists() or (parent / CONFIG_FILENAME).exists():
            return parent
    return None


def _default_config() -> Dict[str, Any]:
    return {
        "dir": ".",
        "out": None,
        "title": None,
        "sort_asc": True,
        "indent": "  ",
    }


def _find_config_file() -> Path | None:
    """Return path to an existing .mdtoc.json, or None."""
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        p = Path(env_path).resolve()
        return p if p.exists() else None
    for d in [Path.cwd(), *Path.cwd().parents]:
        cf = (d / CONFIG_FILENAME).resolve()
        if cf.exists():
            return cf
    repo = _find_repo_root()
    if repo is not None:
        rp = (repo / CONFIG_FILENAME).resolve()
        if rp.exists():
            return rp
    return None


def get_config_path() -> Path:
    """Path of the config file in use, or where a new one would be created (env, else cwd)."""
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path).resolve()
    found = _find_config_file()
    if found is not None:
        return found
    return (Path.cwd() / CONFIG_FILENAME).resolve()


def load_config() -> Dict[str, Any]:
    """Load config from file or return defaults. Unknown keys are dropped."""
    path = _find_config_file()
    out = _default_config()
    if path is None:
        out["_config_file"] = str(get_config_path())
        out["_no_file"] = True
        return out
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError):
        out["_config_file"] = str(path)
        out["_load_error"] = True
        return out
    if isinstance(data, dict):
        out.update({k: v for k, v in data.items() if k in OPTION_KEYS})
    out["_config_file"] = str(path)
    out["_no_file"] = False
    return out


def save_config(data: Dict[str, Any]) -> None:
    """Save config. Only writes known option keys."""
    path = data.get("_config_file")
    path = Path(path) if path else get_config_path()
    defaults = _default_config()
    to_save = {key: data.get(key, defaults[key]) for key in OPTION_KEYS}
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_save, f, indent=2)


def _coerce(key: str, value: str) -> Any:
    """Convert a string from the command line to the config value for key. Raises ValueError."""
    if key == "sort_asc":
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"Invalid value for sort_asc: '{value}' (use true or false)")
    if key in ("out", "title") and value.strip().lower() in _CLEAR:
        return None
    if key == "dir" and not value.strip():
        raise ValueError("dir cannot be empty")
    if key == "indent" and value == "":
        raise ValueError("indent cannot be empty")
    return value


def set_option(key: str, value: str) -> Dict[str, Any]:
    """Set one config key from a string value and save. Returns {"ok", "error"?, "config"}."""
    if key not in OPTION_KEYS:
        return {
            "ok": False,
            "error": f"Unknown config key '{key}'. Choose: {', '.join(OPTION_KEYS)}",
            "config": load_config(),
        }
    try:
        coerced = _coerce(key, value)
    except ValueError as e:
        return {"ok": False, "error": str(e), "config": load_config()}
    data = load_config()
    if data.get("_no_file") or data.get("_load_error"):
        data = _default_config()
        data["_config_file"] = str(get_config_path())
    data[key] = coerced
    save_config(data)
    return {"ok": True, "config": load_config()}


def get_options(**overrides: Any) -> TocOptions:
    """
    Build TocOptions from config values, replaced by any override that is not None.
    Override names are TocOptions field names (directory, out, title, sort_asc, indent).
    Raises ValueError if the merged values are invalid.
    """
    data = load_config()
    values = {field: data.get(key) for key, field in OPTION_KEYS.items()}
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return TocOptions(**values)
    except ValidationError as e:
        raise ValueError(f"Invalid options in {data.get('_config_file')}: {e}") from e
