"""Output schemas for generate commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class GeneratedScriptOutput(BaseModel):
    utility: str = Field(..., description="Utility under test")
    path: str = Field(..., description="Written test script")
    test_cases: list[str] = Field(..., description="ATF test case names in the script")


class GenerateGenerateOutput(BaseOutputSchema):
    """Output schema for the generate command."""

    output_dir: str = Field(..., description="Directory receiving the test scripts")
    scripts: list[GeneratedScriptOutput] = Field(..., description="One entry per written script")
    skipped: list[str] = Field(..., description="Utilities without a manual source or any observed invocation")


register_output_schema("generate", "generate", GenerateGenerateOutput)
