"""Output schemas for API commands (importing registers them)."""

from . import config, execute, generate, option
from ._registry import get_output_schema, register_output_schema

__all__ = [
    "config",
    "execute",
    "generate",
    "get_output_schema",
    "option",
    "register_output_schema",
]
