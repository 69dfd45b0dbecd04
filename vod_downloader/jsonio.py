from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from .logging_utils import get_logger


def _read_text(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8")


async def read_json_file(path: Path) -> Any:
    """Load JSON from ``path``, or ``[]`` when it cannot be read or parsed.

    Missing and corrupted files are deliberately indistinguishable: callers
    treat ``[]`` as "no prior data".
    """
    try:
        data = await asyncio.to_thread(_read_text, path)
        return json.loads(data)
    except Exception as e:
        get_logger().debug("Could not load JSON from %s: %s", path, e)
        return []


__all__ = ["read_json_file"]
