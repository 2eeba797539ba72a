"""Get smokegen home directory path or path under it."""

import os
from pathlib import Path

from ...constants import SMOKEGEN_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get smokegen home directory path or path under it.

    Checks SMOKEGEN_HOME environment variable first, then HOME, then ~/.smokegen.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to smokegen home directory or subpath under it

    Examples:
        >>> get_home_dir("config.json")
        Path("/Users/user/.smokegen/config.json")
    """
    smokegen_home_env = os.environ.get("SMOKEGEN_HOME")
    if smokegen_home_env:
        smokegen_home = Path(smokegen_home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        if home_env:
            smokegen_home = Path(home_env) / SMOKEGEN_HOME_EXT
        else:
            smokegen_home = Path.home() / SMOKEGEN_HOME_EXT

    return smokegen_home / Path(*parts) if parts else smokegen_home
