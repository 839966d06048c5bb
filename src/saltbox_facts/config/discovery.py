"""Config file discovery.

Walk-up finder locates saltbox-facts.toml, similar to how git finds .git/,
falling back to a system-wide file under /etc. Supports the
SALTBOX_FACTS_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "saltbox-facts.toml"
CONFIG_ENV_VAR = "SALTBOX_FACTS_CONFIG"
SYSTEM_CONFIG = Path("/etc/saltbox-facts") / CONFIG_FILENAME


def find_config(
    start: Path | None = None,
    *,
    system_config: Path | None = None,
) -> Path | None:
    """Walk up from *start* (default: cwd) looking for saltbox-facts.toml.

    Returns the path to the config file, or None if not found.
    Checks SALTBOX_FACTS_CONFIG env var first and *system_config*
    (default: SYSTEM_CONFIG) last.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    fallback = SYSTEM_CONFIG if system_config is None else system_config
    if fallback.is_file():
        return fallback
    return None

