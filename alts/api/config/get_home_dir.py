"""Get alts home directory path or path under it."""

import os
from pathlib import Path

from ...constants import ALTS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get alts home directory path or path under it.

    Checks the ALTS_HOME environment variable first, defaults to ~/.alts.

    Examples:
        >>> get_home_dir()
        Path("/home/user/.alts")
        >>> get_home_dir("config.json")
        Path("/home/user/.alts/config.json")
    """
    alts_home_env = os.environ.get("ALTS_HOME")
    if alts_home_env:
        alts_home = Path(alts_home_env).expanduser().resolve()
    else:
        alts_home = Path.home() / ALTS_HOME_EXT

    return alts_home / Path(*parts) if parts else alts_home
