"""Helpers for reading plan documents and bundled schemas."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any, Dict, Union

import yaml

__all__ = ["load_json", "load_data"]


PathType = Union[str, PathLike]


def load_json(path: PathType) -> Dict[str, Any]:
    """Return the parsed JSON contents of ``path``.

    :class:`FileNotFoundError` is raised for a missing file and
    :class:`ValueError`, naming the path, for undecodable contents.
    """

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {p}: {exc}") from exc


def load_data(path: PathType) -> Any:
    """Return the parsed contents of ``path``; ``.yaml``/``.yml`` read as YAML."""

    p = Path(path)
    if p.suffix.lower() not in {".yaml", ".yml"}:
        return load_json(p)
    if not p.exists():
        raise FileNotFoundError(p)
    try:
        return yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {p}: {exc}") from exc
