"""Generate domain - render observed option behaviour as atf-sh tests."""

from .build_command import build_command
from .collect_test_cases import collect_test_cases
from .collect_usage_checks import collect_usage_checks
from .format_atf_check import format_atf_check
from .GenerateError import GenerateError
from .render_test_script import render_test_script
from .TestCase import TestCase
from .UsageCheck import UsageCheck
from .write_test_script import write_test_script

__all__ = [
    "GenerateError",
    "TestCase",
    "UsageCheck",
    "build_command",
    "collect_test_cases",
    "collect_usage_checks",
    "format_atf_check",
    "render_test_script",
    "write_test_script",
]
