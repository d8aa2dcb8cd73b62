from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MAX_COUNT = 50


def _parse_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric value %r; using %d.", raw, default)
        return default
    if value <= 0:
        return default
    return value


def max_batch_count() -> int:
    return _parse_int(os.getenv("PASSFORGE_MAX_COUNT"), DEFAULT_MAX_COUNT)


def dictionary_path() -> Path | None:
    raw = os.getenv("PASSFORGE_DICT_PATH", "").strip()
    if not raw:
        return None
    return Path(raw)


def shared_templates_dir(root_dir: Path) -> Path:
    env_path = os.getenv("PASSFORGE_SHARED_TEMPLATES")
    if env_path:
        return Path(env_path)
    return root_dir / "passforge" / "templates"
