"""Tests for the child process runner."""

import io
import time
from pathlib import Path

import pytest

from notarize_tool.core.process import ProcessTimeoutError, run_process, strip_final_newline


class TestStripFinalNewline:
    """Tests for strip_final_newline."""

    @pytest.mark.parametrize("text,expected", [
        ("Accepted\n", "Accepted"),
        ("Accepted\r\n", "Accepted"),
        ("a\n\n", "a\n"),
        ("no newline", "no newline"),
        ("", ""),
    ])
    def test_strips_one_newline(self, text: str, expected: str) -> None:
        """Only a single trailing newline is removed."""
        assert strip_final_newline(text) == expected


class TestRunProcess:
    """Tests for run_process."""

    @pytest.mark.asyncio
    async def test_captures_output_and_exit_code(self, make_tool) -> None:
        """Both streams and the exit code are captured."""
        tool = make_tool("tool", 'echo "out line"\necho "err line" >&2\nexit 3')
        outcome = await run_process([tool, "arg"])
        assert outcome.exit_code == 3
        assert not outcome.succeeded
        assert outcome.stdout == "out line"
        assert outcome.stderr == "err line"
        assert outcome.args == [str(tool), "arg"]

    @pytest.mark.asyncio
    async def test_success(self, make_tool) -> None:
        """Exit status 0 is success."""
        tool = make_tool("tool", "exit 0")
        outcome = await run_process([tool])
        assert outcome.succeeded
        assert outcome.stdout == ""
        assert outcome.stderr == ""

    @pytest.mark.asyncio
    async def test_streams_to_sinks(self, make_tool) -> None:
        """Output is forwarded to the sinks while being captured."""
        tool = make_tool("tool", 'echo "progress"\necho "warning" >&2')
        out, err = io.StringIO(), io.StringIO()
        outcome = await run_process([tool], stream_output=True, stdout_sink=out, stderr_sink=err)
        assert out.getvalue() == "progress\n"
        assert err.getvalue() == "warning\n"
        assert outcome.stdout == "progress"
        assert outcome.stderr == "warning"

    @pytest.mark.asyncio
    async def test_no_forwarding_without_stream_output(self, make_tool) -> None:
        """Sinks are ignored unless streaming is requested."""
        tool = make_tool("tool", 'echo "progress"\necho "warning" >&2')
        out, err = io.StringIO(), io.StringIO()
        await run_process([tool], stream_output=False, stdout_sink=out, stderr_sink=err)
        assert out.getvalue() == ""
        assert err.getvalue() == ""

    @pytest.mark.asyncio
    async def test_streams_to_host_streams_by_default(self, make_tool, capsys) -> None:
        """Default sinks are the host's stdout and stderr."""
        tool = make_tool("tool", 'echo "to stdout"\necho "to stderr" >&2')
        await run_process([tool], stream_output=True)
        captured = capsys.readouterr()
        assert "to stdout" in captured.out
        assert "to stderr" in captured.err

    @pytest.mark.asyncio
    async def test_large_output(self, make_tool) -> None:
        """Output larger than the pipe buffer does not deadlock."""
        tool = make_tool("tool", 'i=0\nwhile [ $i -lt 5000 ]; do echo "line $i"; echo "err $i" >&2; i=$((i+1)); done')
        outcome = await run_process([tool])
        assert outcome.succeeded
        assert outcome.stdout.splitlines()[-1] == "line 4999"
        assert outcome.stderr.splitlines()[-1] == "err 4999"

    @pytest.mark.asyncio
    async def test_timeout_kills_process(self, make_tool) -> None:
        """A process running past the timeout is killed."""
        tool = make_tool("tool", 'echo "started"\nexec sleep 30')
        with pytest.raises(ProcessTimeoutError) as exc_info:
            await run_process([tool], timeout=0.5)
        assert exc_info.value.timeout == 0.5
        assert exc_info.value.stdout == "started"

    @pytest.mark.asyncio
    async def test_timeout_kills_children(self, make_tool) -> None:
        """Children still holding the output pipes are killed with the process."""
        tool = make_tool("tool", 'echo "started"\nsleep 30')
        started = time.monotonic()
        with pytest.raises(ProcessTimeoutError) as exc_info:
            await run_process([tool], timeout=0.5)
        assert time.monotonic() - started < 5
        assert exc_info.value.stdout == "started"

    @pytest.mark.asyncio
    async def test_spawn_failure(self, tmp_path: Path) -> None:
        """A missing program raises OSError."""
        with pytest.raises(OSError):
            await run_process([tmp_path / "does-not-exist"])
