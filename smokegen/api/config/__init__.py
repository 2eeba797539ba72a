"""Config domain - configuration models and loading."""

from .ExecuteConfig import ExecuteConfig
from .GenerateConfig import GenerateConfig
from .LogConfig import LogConfig
from .ScanConfig import ExtraOptionConfig, ScanConfig
from .SmokegenConfig import SmokegenConfig

__all__ = [
    "ExecuteConfig",
    "ExtraOptionConfig",
    "GenerateConfig",
    "LogConfig",
    "ScanConfig",
    "SmokegenConfig",
]
