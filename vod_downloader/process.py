"""Subprocess execution with live console streaming."""

from __future__ import annotations

import asyncio
import codecs
from typing import Callable, Optional, Sequence

from rich.console import Console

from .config import get_config
from .logging_utils import get_logger

console = Console()

Sink = Callable[[str], None]


class EmptyCommandError(ValueError):
    pass


def console_sink(text: str) -> None:
    # Bypass rich rendering so \r, \b and tabs reach the terminal as-is
    console.file.write(text)
    console.file.flush()


async def _drain(stream: asyncio.StreamReader, sink: Sink, chunk_size: int) -> None:
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        chunk = await stream.read(chunk_size)
        if not chunk:
            break
        text = decoder.decode(chunk)
        if text:
            sink(text)
    tail = decoder.decode(b"", final=True)
    if tail:
        sink(tail)


async def exec_command(
    command: Sequence[str],
    sink: Optional[Sink] = None,
    chunk_size: Optional[int] = None,
) -> int:
    """Run ``command`` and stream its stdout and stderr to ``sink``.

    The first element is the executable, the rest are its arguments. Both
    streams are drained concurrently, so output from the two may interleave
    in any order. Returns the exit code once the process has exited and both
    streams hit EOF (negative when killed by a signal).

    Raises
    ------
    EmptyCommandError
        ``command`` has no executable.
    OSError
        The executable could not be spawned (``FileNotFoundError``,
        ``PermissionError``, ...).
    """
    if not command:
        raise EmptyCommandError("Command must name an executable")
    sink = sink or console_sink
    chunk_size = chunk_size or get_config().read_chunk_size
    log = get_logger()

    process = await asyncio.create_subprocess_exec(
        command[0],
        *command[1:],
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    log.debug("Spawned %s (pid=%s)", command[0], process.pid)

    drains = [
        asyncio.ensure_future(_drain(process.stdout, sink, chunk_size)),  # type: ignore[arg-type]
        asyncio.ensure_future(_drain(process.stderr, sink, chunk_size)),  # type: ignore[arg-type]
    ]
    try:
        await asyncio.gather(*drains)
    except BaseException:
        for task in drains:
            task.cancel()
        await asyncio.gather(*drains, return_exceptions=True)
        if process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                pass
        await process.wait()
        raise
    code = await process.wait()
    log.debug("%s exited with code %s", command[0], code)
    return code


__all__ = ["exec_command", "console_sink", "EmptyCommandError", "Sink"]
