"""Environment components directory of a workspace."""

from pathlib import Path

from .find_scope_path import find_scope_path


def get_env_components_dir(start: Path, components_dir: str = "components") -> Path:
    """Return ``<scope>/<components_dir>`` for the workspace containing ``start``."""
    return find_scope_path(start) / components_dir
