"""Top-level bitdoctor configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from .DoctorConfig import DoctorConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig


class BitdoctorConfig(BaseModel):
    """Top-level configuration for bitdoctor."""

    model_config = ConfigDict(extra="forbid")

    doctor: DoctorConfig = Field(default_factory=DoctorConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @computed_field
    def path(self) -> Path:
        """Path to config file."""
        return self.get_config_path()

    @classmethod
    def get_config_path(cls) -> Path:
        return get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "BitdoctorConfig":
        """Load and validate config from file.

        A missing config file yields the defaults for every section.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
        except TypeError as e:
            raise ValueError(f"Configuration validation error: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary keyed by section."""
        return {
            "doctor": self.doctor.model_dump(),
            "log": self.log.model_dump(),
        }
