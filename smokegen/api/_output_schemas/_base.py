"""Fields shared by every command output."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Common part of scan, exec, generate and config outputs.

    Faults that end a command go to ``errors``. Anything the command
    recovered from, such as a skipped invocation, goes to ``warnings``.
    """

    errors: list[str] = Field(default_factory=list, description="Faults that stopped the command")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal problems met along the way")
