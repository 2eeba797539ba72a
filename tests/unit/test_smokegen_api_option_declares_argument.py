"""Unit tests for smokegen.api.option._declares_argument module."""

import pytest

from smokegen.api.option._declares_argument import _declares_argument

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (".It Fl f Ar fmt", True),
        (".It Fl r Ar seconds", True),
        (".It Fl v Ns Oo Cm + | - Oc Ns Ar val Ns Op Cm ymwdHMS", True),
        (".It Fl d Op Ar dst", False),
        (".It Fl h", False),
        (".It Fl Ar", False),
        (".It Fl", False),
    ],
)
def test_declares_argument(line, expected):
    assert _declares_argument(line, line.find(".It Fl")) is expected
