"""Notarization submission with notarytool"""

import logging
from pathlib import Path
from typing import IO, List, Optional

from ..api.exceptions import PreconditionError, SubmissionError, SubmissionTimeoutError
from ..constants import NOTARYTOOL_TIMEOUT, SUBMIT_TOOL
from ..models.result import OperationStatus, SubmissionResult
from .process import ProcessTimeoutError, run_process
from .reporter import Reporter

logger = logging.getLogger(__name__)


class Submitter:
    """Submits an archive to the notary service and waits for the verdict

    Waiting is done by notarytool itself (--wait --timeout 15m). The call
    is additionally bounded on our side by wait_timeout, after which the
    tool is killed and the submission fails.
    """

    def __init__(self,
                 reporter: Reporter,
                 tool: str = SUBMIT_TOOL,
                 stdout_sink: Optional[IO[str]] = None,
                 stderr_sink: Optional[IO[str]] = None):
        self.reporter = reporter
        self.tool = tool
        self.stdout_sink = stdout_sink
        self.stderr_sink = stderr_sink

    def build_command(self,
                      archive_path: Path,
                      key_path: Path,
                      api_key_id: str,
                      api_issuer: str,
                      verbose: bool = False) -> List[str]:
        """Build the notarytool command line"""
        command = [
            self.tool,
            "notarytool", "submit",
            "--key", str(key_path),
            "--key-id", api_key_id,
            "--issuer", api_issuer,
            "--wait",
            "--timeout", NOTARYTOOL_TIMEOUT,
        ]
        if verbose:
            command.append("--verbose")
        command.append(str(archive_path))
        return command

    async def submit(self,
                     product_path: Path,
                     archive_path: Path,
                     verbose: bool,
                     api_key_id: str,
                     api_issuer: str,
                     key_path: Path,
                     wait_timeout: Optional[float] = None) -> SubmissionResult:
        """
        Submit archive_path and block until notarytool exits

        Args:
            product_path: Original product, must still exist
            archive_path: Archive to upload
            verbose: Pass --verbose and stream tool output live
            api_key_id: App Store Connect key identifier
            api_issuer: App Store Connect issuer identifier
            key_path: File holding the API key
            wait_timeout: Seconds before the tool is killed

        Returns:
            SubmissionResult for an accepted submission

        Raises:
            PreconditionError: If product_path no longer exists
            SubmissionError: If notarytool exits non-zero or cannot start
            SubmissionTimeoutError: If wait_timeout elapses
        """
        if not Path(product_path).exists():
            raise PreconditionError(str(product_path))

        command = self.build_command(archive_path, key_path, api_key_id, api_issuer, verbose)
        logger.debug(f"Submitting {archive_path} with key id {api_key_id}")

        try:
            outcome = await run_process(
                command,
                stream_output=verbose,
                timeout=wait_timeout,
                stdout_sink=self.stdout_sink,
                stderr_sink=self.stderr_sink
            )
        except ProcessTimeoutError as e:
            error = SubmissionTimeoutError(e.timeout, e.stdout, e.stderr)
            self.reporter.error(error.message)
            raise error
        except OSError as e:
            error = SubmissionError("", f"Failed to start {self.tool}: {e}")
            self.reporter.error(error.message)
            raise error

        result = SubmissionResult(
            status=OperationStatus.IN_PROGRESS,
            exit_code=outcome.exit_code,
            stdout=outcome.stdout,
            stderr=outcome.stderr
        )

        if outcome.succeeded:
            self.reporter.info(outcome.stdout)
            result.message = outcome.stdout
            result.complete(OperationStatus.SUCCESS)
            return result

        error = SubmissionError(outcome.stdout, outcome.stderr, outcome.exit_code)
        self.reporter.error(error.message)
        raise error
