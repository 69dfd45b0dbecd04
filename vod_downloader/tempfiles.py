from __future__ import annotations

import asyncio
import random
import string
import time
from pathlib import Path

from .config import AppConfig, get_config

_BASE36 = string.digits + string.ascii_lowercase


def to_base36(n: int) -> str:
    if n < 0:
        raise ValueError("Negative values have no base-36 id")
    if n == 0:
        return "0"
    out = []
    while n:
        n, rem = divmod(n, 36)
        out.append(_BASE36[rem])
    return "".join(reversed(out))


def make_unique_id() -> str:
    """Millisecond timestamp in base 36 followed by random base-36 digits."""
    return to_base36(int(time.time() * 1000)) + to_base36(random.getrandbits(53))


async def ensure_dir_exists(path: Path) -> None:
    """Create ``path`` and missing parents.

    Anything already at ``path`` counts as success; other failures
    (permissions, full disk) propagate.
    """
    try:
        await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)
    except FileExistsError:
        pass


async def temp_file_path(
    prefix: str | None = None, suffix: str = "", config: AppConfig | None = None
) -> Path:
    """Return a fresh ``{prefix}_{id}{suffix}`` path inside the temp dir.

    ``prefix`` defaults to the config's ``temp_prefix``. Only the directory
    is created, never the file itself.
    """
    config = config or get_config()
    if prefix is None:
        prefix = config.temp_prefix
    temp_dir = config.temp_dir
    await ensure_dir_exists(temp_dir)
    return temp_dir / f"{prefix}_{make_unique_id()}{suffix}"


__all__ = ["ensure_dir_exists", "temp_file_path", "make_unique_id", "to_base36"]
