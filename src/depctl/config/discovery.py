"""Config file discovery.

Walk-up finder locates depctl.toml, the way git finds .git/.
The DEPCTL_CONFIG env var short-circuits the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "depctl.toml"
CONFIG_ENV_VAR = "DEPCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest depctl.toml at or above *start* (default: cwd).

    If DEPCTL_CONFIG is set, returns that path when it is a file and None
    otherwise, without walking.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
