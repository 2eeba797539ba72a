"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "integration", "config"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Manual page fixtures
# =============================================================================

DATE_MANPAGE = """\
.Dd May 7, 2015
.Dt DATE 1
.Os
.Sh NAME
.Nm date
.Nd display or set date and time
.Sh DESCRIPTION
The options are as follows:
.Bl -tag -width Ds
.It Fl h
Print a brief help message
and exit.
.It Fl n
Obsolete flag, accepted and ignored for compatibility.
.It Fl r Ar seconds
Print the date and time represented by
.Ar seconds .
.It Fl v
Adjust (i.e., take the current date and display the result of the
adjustment; not actually set the date) the second, minute, hour.
.El
.Sh EXIT STATUS
.Ex -std
"""

ECHO_MANPAGE = """\
.Dt ECHO 1
.Sh DESCRIPTION
.Bl -tag -width Ds
.It Fl h
Show the help text.
.It Fl v
Show version information.
.El
"""


def write_manpage(groff_dir: Path, name: str, content: str) -> Path:
    """Write ``content`` as ``<groff_dir>/<name>`` and return the path."""
    groff_dir.mkdir(parents=True, exist_ok=True)
    path = groff_dir / name
    path.write_text(content, encoding="utf-8")
    return path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def smokegen_home(tmp_path, monkeypatch) -> Path:
    """Isolate every test in its own SMOKEGEN_HOME."""
    home = tmp_path / "smokegen_home"
    home.mkdir()
    monkeypatch.setenv("SMOKEGEN_HOME", str(home))
    return home


@pytest.fixture
def write_config(smokegen_home):
    """Write a config.json into the isolated home directory."""

    def _write(data: dict) -> Path:
        path = smokegen_home / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def groff_dir(tmp_path) -> Path:
    """Manual source directory holding date.1 and echo.1."""
    directory = tmp_path / "groff"
    write_manpage(directory, "date.1", DATE_MANPAGE)
    write_manpage(directory, "echo.1", ECHO_MANPAGE)
    return directory
