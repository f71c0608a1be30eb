"""Notarization pipeline"""

import logging
from typing import Any, Callable, Dict, Optional

from ..api.exceptions import (
    ConfigError,
    NotarizeToolError,
    PreconditionError,
    SubmissionError,
)
from ..constants import (
    ErrorCode,
    GROUP_ARCHIVING,
    GROUP_SUBMITTING,
    MSG_ARCHIVE_CREATED,
    MSG_PACKAGING_FAILED,
    MSG_UNEXPECTED_ERROR,
    OUTPUT_PRODUCT_PATH,
)
from ..core import Archiver, CredentialMaterializer, Reporter, Submitter, Workspace
from ..models import (
    FailureKind,
    NotarizeResult,
    OperationStatus,
    PipelineStage,
    SubmissionConfig,
    SubmissionResult,
)

logger = logging.getLogger(__name__)


class NotarizeService:
    """Runs configuring, archiving and submitting in order

    Every failure ends in exactly one ``set_failed`` report. An archiving
    failure is reported as "Notarization failed"; every other failure as
    "Notarization failed with an unexpected error: <message>". The
    workspace holding the API key and the archive is removed on every
    exit path.
    """

    def __init__(self,
                 reporter: Optional[Reporter] = None,
                 archiver: Optional[Archiver] = None,
                 submitter: Optional[Submitter] = None,
                 workspace_factory: Callable[[], Workspace] = Workspace):
        """
        Initialize notarize service

        Args:
            reporter: Reporter for progress and failures
            archiver: Archiver instance (default: ditto)
            submitter: Submitter instance (default: xcrun notarytool)
            workspace_factory: Creates the per-run workspace
        """
        self.reporter = reporter or Reporter()
        self.archiver = archiver or Archiver(self.reporter)
        self.submitter = submitter or Submitter(self.reporter)
        self.workspace_factory = workspace_factory

    async def run(self, inputs: Dict[str, Any]) -> NotarizeResult:
        """
        Execute the notarization pipeline

        Args:
            inputs: Run inputs keyed by input name

        Returns:
            NotarizeResult describing the outcome
        """
        result = NotarizeResult(status=OperationStatus.IN_PROGRESS)

        try:
            with self.workspace_factory() as workspace:
                await self._run(inputs, workspace, result)

        except ConfigError as e:
            self._fail(result, FailureKind.CONFIGURATION, e)
        except PreconditionError as e:
            self._fail(result, FailureKind.PRECONDITION, e)
        except SubmissionError as e:
            self._fail(result, FailureKind.SUBMISSION, e)
        except Exception as e:
            logger.debug("Unexpected error during notarization", exc_info=True)
            self._fail(result, FailureKind.UNEXPECTED, e)

        return result

    async def _run(self, inputs: Dict[str, Any], workspace: Workspace, result: NotarizeResult) -> None:
        # Configuring
        result.stage = PipelineStage.CONFIGURING
        config = SubmissionConfig.from_dict(inputs)
        result.product_path = config.product_path

        materializer = CredentialMaterializer(workspace.credential_path)
        key_path = materializer.materialize(config.credentials.api_key)

        # Archiving
        result.stage = PipelineStage.ARCHIVING
        with self.reporter.group(GROUP_ARCHIVING):
            archive = await self.archiver.archive(config.product_path, workspace.archive_path)
            if archive.is_success:
                self.reporter.info(MSG_ARCHIVE_CREATED.format(path=archive.archive_path))

        if not archive.is_success:
            result.fail(FailureKind.PACKAGING, MSG_PACKAGING_FAILED, ErrorCode.PACKAGING_FAILED)
            self.reporter.set_failed(MSG_PACKAGING_FAILED)
            return

        result.archive_path = archive.archive_path

        # Submitting
        result.stage = PipelineStage.SUBMITTING
        with self.reporter.group(GROUP_SUBMITTING):
            result.submission = await self.submitter.submit(
                product_path=config.product_path,
                archive_path=archive.archive_path,
                verbose=config.verbose,
                api_key_id=config.credentials.api_key_id,
                api_issuer=config.credentials.api_issuer,
                key_path=key_path,
                wait_timeout=config.wait_timeout
            )

        # Done
        product_path = str(config.product_path)
        self.reporter.set_output(OUTPUT_PRODUCT_PATH, product_path)
        result.outputs[OUTPUT_PRODUCT_PATH] = product_path
        result.stage = PipelineStage.DONE
        result.message = result.submission.message
        result.complete(OperationStatus.SUCCESS)

    def _fail(self, result: NotarizeResult, kind: FailureKind, error: Exception) -> None:
        if isinstance(error, SubmissionError):
            result.submission = _submission_from_error(error)

        if isinstance(error, NotarizeToolError):
            code = error.error_code or ErrorCode.UNEXPECTED_ERROR
            detail = error.message
        else:
            code = ErrorCode.UNEXPECTED_ERROR
            detail = str(error)

        message = MSG_UNEXPECTED_ERROR.format(message=detail)
        result.fail(kind, message, code)
        self.reporter.set_failed(message)


def _submission_from_error(error: SubmissionError) -> SubmissionResult:
    submission = SubmissionResult(
        status=OperationStatus.FAILED,
        message=error.message,
        exit_code=error.exit_code,
        stdout=error.stdout,
        stderr=error.stderr
    )
    submission.complete()
    return submission
