"""Configuration - pydantic models loaded from config.json."""

from .BitdoctorConfig import BitdoctorConfig
from .DoctorConfig import DoctorConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig

__all__ = ["BitdoctorConfig", "DoctorConfig", "LogConfig", "get_home_dir"]
