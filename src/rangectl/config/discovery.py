"""Config file discovery.

Walks up from the working directory looking for rangectl.toml, the way git
finds .git/. The RANGECTL_CONFIG env var and --config flag take precedence.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "rangectl.toml"
CONFIG_ENV_VAR = "RANGECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest rangectl.toml at or above *start* (default: cwd).

    An explicit RANGECTL_CONFIG path wins; if it does not exist, no file is
    used rather than falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
