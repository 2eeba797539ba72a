"""Scan configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ..option.OptionDefinition import OptionDefinition
from ..option.OptionKind import OptionKind


class ExtraOptionConfig(BaseModel):
    """An additional short option to treat as easily testable."""

    model_config = ConfigDict(extra="forbid")

    value: str = Field(..., min_length=1, pattern=r"^\S+$", description="Option name without dash")
    keyword: str = Field(..., min_length=1, description="Keyword expected in the option description")

    def to_definition(self) -> OptionDefinition:
        return OptionDefinition(kind=OptionKind.SHORT, value=self.value, keyword=self.keyword)


class ScanConfig(BaseModel):
    """Where manual sources live and which extra options to look for."""

    model_config = ConfigDict(extra="forbid")

    groff_dir: str = Field("groff", description="Directory holding <utility>.<section> manual sources")
    extra_options: list[ExtraOptionConfig] = Field(default_factory=list, description="Extra testable options")
