"""Output schemas for API commands, registered on import."""

from . import config, doctor
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "config", "doctor", "get_output_schema", "register_output_schema"]
