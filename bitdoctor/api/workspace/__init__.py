"""Workspace lookup - finds where Bit keeps installed components."""

from .find_scope_path import find_scope_path
from .get_env_components_dir import get_env_components_dir
from .WorkspaceNotFoundError import WorkspaceNotFoundError

__all__ = ["WorkspaceNotFoundError", "find_scope_path", "get_env_components_dir"]
