"""Locating topology files and reading their template variables."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from clabtools.exceptions import ClabError

VAR_FILE_SUFFIX = "_vars"
_VAR_FILE_EXTENSIONS = (".yaml", ".yml", ".json")
_TOPOLOGY_GLOB = "*.clab.y*ml"


def _strip_extension(path: str) -> str:
    """Drop the extension of the last path element, the way the lab tooling names it."""
    base = path.replace("\\", "/").rsplit("/", 1)[-1]
    dot = base.rfind(".")
    if dot == -1:
        return path
    return path[: len(path) - (len(base) - dot)]


def read_template_variables(topo: str | Path, vars_file: str | Path | None = None) -> Any:
    """Load the variables used to render a topology template.

    When no variables file is given, ``<topo stem>_vars.yaml``, ``.yml`` and
    ``.json`` are tried in that order next to the topology. Returns None when
    no variables file exists.
    """
    if not vars_file:
        stem = _strip_extension(str(topo))
        for ext in _VAR_FILE_EXTENSIONS:
            candidate = Path(f"{stem}{VAR_FILE_SUFFIX}{ext}")
            if candidate.exists():
                vars_file = candidate
                break
        else:
            return None
    data = Path(vars_file).read_text()
    return yaml.safe_load(data)


def find_topology_file(directory: str | Path | None = None) -> str:
    """Return the single ``*.clab.y*ml`` file in directory (default: current one)."""
    base = Path(directory) if directory is not None else Path(".")
    files = sorted(p.name for p in base.glob(_TOPOLOGY_GLOB) if p.is_file())
    if len(files) != 1:
        raise ClabError("none or more than one topology files found, can't auto select one")
    return str(base / files[0])