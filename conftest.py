"""Root conftest: test environment must be in place before chatroom_service.config is imported."""
from __future__ import annotations

import os
from pathlib import Path

_ROOT = Path(__file__).resolve().parent


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for raw in path.read_text().splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        os.environ.setdefault(key.strip(), value.strip().strip("'\""))


_load_env_file(_ROOT / ".env.test")

# Unit tests drive sweeps by hand; never start the background loop
os.environ["PRESENCE_SWEEPER_ENABLED"] = "false"
