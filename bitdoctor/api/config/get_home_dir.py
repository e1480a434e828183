"""Utility to discover the bitdoctor home directory."""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get home directory based on BITDOCTOR_HOME or default to ~/.bitdoctor."""
    home_env = os.environ.get("BITDOCTOR_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".bitdoctor"
