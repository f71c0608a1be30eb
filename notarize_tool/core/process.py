"""Child process execution"""

import asyncio
import codecs
import logging
import os
import signal
import sys
from dataclasses import dataclass, field
from typing import IO, List, Optional, Sequence

from ..constants import READ_CHUNK_SIZE

logger = logging.getLogger(__name__)


@dataclass
class ProcessOutcome:
    """Exit status and captured output of a finished child process"""

    args: List[str]
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        """Check if the process exited with status 0"""
        return self.exit_code == 0

    @property
    def command_line(self) -> str:
        """Command line for display"""
        return " ".join(self.args)


class ProcessTimeoutError(asyncio.TimeoutError):
    """Child process was killed after exceeding its timeout"""

    def __init__(self, args: Sequence[str], timeout: float, stdout: str = "", stderr: str = ""):
        super().__init__(f"Command timed out after {timeout:g} seconds: {' '.join(args)}")
        self.args_list = list(args)
        self.timeout = timeout
        self.stdout = stdout
        self.stderr = stderr


@dataclass
class _StreamCollector:
    """Accumulates one output stream and optionally forwards it"""

    sink: Optional[IO[str]] = None
    chunks: List[str] = field(default_factory=list)

    def __post_init__(self):
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def feed(self, data: bytes, final: bool = False) -> None:
        text = self._decoder.decode(data, final=final)
        if not text:
            return
        self.chunks.append(text)
        if self.sink is not None:
            self.sink.write(text)
            self.sink.flush()

    @property
    def text(self) -> str:
        return strip_final_newline("".join(self.chunks))


def strip_final_newline(text: str) -> str:
    """Remove a single trailing newline"""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


async def _pump(stream: asyncio.StreamReader, collector: _StreamCollector) -> None:
    while True:
        data = await stream.read(READ_CHUNK_SIZE)
        if not data:
            collector.feed(b"", final=True)
            return
        collector.feed(data)


def _kill_group(process: asyncio.subprocess.Process) -> None:
    """Kill the process and everything it started"""
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except (ProcessLookupError, PermissionError):
        pass


async def run_process(args: Sequence[str],
                      stream_output: bool = False,
                      timeout: Optional[float] = None,
                      stdout_sink: Optional[IO[str]] = None,
                      stderr_sink: Optional[IO[str]] = None) -> ProcessOutcome:
    """
    Run a child process to completion and capture its output

    Args:
        args: Program and arguments
        stream_output: Forward output to the sinks while the process runs
        timeout: Seconds to wait before killing the process
        stdout_sink: Destination for forwarded stdout (default: sys.stdout)
        stderr_sink: Destination for forwarded stderr (default: sys.stderr)

    Returns:
        ProcessOutcome with exit code and captured output

    Raises:
        OSError: If the process cannot be started
        ProcessTimeoutError: If the timeout elapses
    """
    args = [str(arg) for arg in args]

    if stream_output:
        stdout_sink = stdout_sink if stdout_sink is not None else sys.stdout
        stderr_sink = stderr_sink if stderr_sink is not None else sys.stderr
    else:
        stdout_sink = stderr_sink = None

    out = _StreamCollector(sink=stdout_sink)
    err = _StreamCollector(sink=stderr_sink)

    logger.debug(f"Running: {' '.join(args)}")

    process = await asyncio.create_subprocess_exec(
        *args,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        start_new_session=True
    )

    async def wait_for_exit() -> int:
        await asyncio.gather(_pump(process.stdout, out), _pump(process.stderr, err))
        return await process.wait()

    try:
        exit_code = await asyncio.wait_for(wait_for_exit(), timeout=timeout)
    except asyncio.CancelledError:
        _kill_group(process)
        raise
    except asyncio.TimeoutError:
        # Children of the tool hold the pipes open, so the whole group goes
        _kill_group(process)
        await process.wait()
        logger.debug(f"Killed after {timeout}s: {' '.join(args)}")
        raise ProcessTimeoutError(args, timeout, out.text, err.text)

    logger.debug(f"Exited with {exit_code}: {' '.join(args)}")

    return ProcessOutcome(
        args=args,
        exit_code=exit_code,
        stdout=out.text,
        stderr=err.text
    )
