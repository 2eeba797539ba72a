"""Top-level smokegen configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ExecuteConfig import ExecuteConfig
from .GenerateConfig import GenerateConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .ScanConfig import ScanConfig


class SmokegenConfig(BaseModel):
    """Top-level configuration for smokegen.

    Every section has defaults, so a missing config file is not an error.
    """

    model_config = ConfigDict(extra="forbid")

    scan: ScanConfig = Field(default_factory=ScanConfig)
    execute: ExecuteConfig = Field(default_factory=ExecuteConfig)
    generate: GenerateConfig = Field(default_factory=GenerateConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on SMOKEGEN_HOME or default to ~/.smokegen."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls, path: Path | None = None) -> "SmokegenConfig":
        """Load and validate config from file.

        Args:
            path: Config file to read (default: <home>/config.json)

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = path or cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object (found: {type(raw).__name__})")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary for serialization."""
        return self.model_dump(mode="python")
