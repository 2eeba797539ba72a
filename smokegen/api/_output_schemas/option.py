"""Output schemas for option commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class MatchedOptionOutput(BaseModel):
    kind: str = Field(..., description="Option kind: s (short) or l (long)")
    value: str = Field(..., description="Option name without dashes")
    keyword: str = Field(..., description="Keyword found in the option description")


class OptionScanOutput(BaseOutputSchema):
    """Output schema for the scan command."""

    utility: str = Field(..., description="Utility whose manual page was scanned")
    groff_dir: str = Field(..., description="Directory holding the manual sources")
    sections_found: list[str] = Field(..., description="Manual sections that had a source file")
    options: list[MatchedOptionOutput] = Field(..., description="Matched options in declaration order")
    argument_options: list[str] = Field(..., description="Options declared with a required argument")


register_output_schema("option", "scan", OptionScanOutput)
