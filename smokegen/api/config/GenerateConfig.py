"""Generate configuration."""

from pydantic import BaseModel, ConfigDict, Field


class GenerateConfig(BaseModel):
    """Test script output settings."""

    model_config = ConfigDict(extra="forbid")

    output_dir: str = Field("generated_tests", description="Directory receiving <utility>_test.sh scripts")
