"""Execute configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_MAX_OUTPUT_BYTES, DEFAULT_TIMEOUT_SECS


class ExecuteConfig(BaseModel):
    """Bounded execution settings."""

    model_config = ConfigDict(extra="forbid")

    timeout_secs: float = Field(DEFAULT_TIMEOUT_SECS, gt=0, description="Seconds a utility gets to produce output")
    shell: str = Field("/bin/sh", min_length=1, description="Command interpreter invoked as <shell> -c <command>")
    clean_env: bool = Field(True, description="Run utilities with an empty environment")
    max_output_bytes: int = Field(
        DEFAULT_MAX_OUTPUT_BYTES, gt=0, description="Bytes of output kept per invocation, the child is terminated past it"
    )
    on_error: Literal["skip", "abort"] = Field(
        "skip", description="On an execution fault, skip the affected command or abort the run"
    )
