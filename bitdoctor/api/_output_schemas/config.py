"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    content is {"sections": [...]} when no section is given, else the section dict.
    """

    section: str = Field(..., description="Section name, empty string if none provided (listing all sections)")
    content: dict[str, Any] = Field(..., description="Section names or the section config dict")
    config_path: str = Field(..., description="Path to the configuration file")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
