"""Output schemas for execute commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ExecuteExecOutput(BaseOutputSchema):
    """Output schema for the exec command."""

    command: str = Field(..., description="Shell command that was run")
    timeout_secs: float = Field(..., description="Output window granted to the command")
    captured_output: str = Field(..., description="Standard output captured, empty string if none")
    exit_status: int | None = Field(..., description="Exit status, 128+N if killed by signal N, null on failure")
    truncated: bool = Field(False, description="Whether output was cut at the configured size cap")


register_output_schema("execute", "exec", ExecuteExecOutput)
