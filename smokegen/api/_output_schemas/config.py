"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    config_path: str = Field(..., description="Path to the configuration file")
    exists: bool = Field(..., description="Whether the configuration file exists (defaults apply otherwise)")
    content: dict[str, Any] = Field(..., description="Effective configuration, empty dict if loading failed")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
