"""Product archiving with ditto"""

import logging
from pathlib import Path
from typing import List

from ..api.exceptions import PackagingError
from ..constants import ARCHIVE_TOOL, ErrorCode
from ..models.result import ArchiveResult, OperationStatus
from .process import run_process
from .reporter import Reporter

logger = logging.getLogger(__name__)


class Archiver:
    """Packs a product into a single zip archive

    Failures never raise. They are reported as errors and returned as a
    failed ArchiveResult without an archive path, so the caller can stop
    before any credential is used or anything is uploaded.
    """

    def __init__(self, reporter: Reporter, tool: str = ARCHIVE_TOOL):
        self.reporter = reporter
        self.tool = tool

    def build_command(self, product_path: Path, archive_path: Path) -> List[str]:
        """Build the ditto command line"""
        return [
            self.tool,
            "-c",            # Create an archive at the destination path
            "-k",            # PKZip format
            "--keepParent",  # Embed the parent directory name
            str(product_path),
            str(archive_path),
        ]

    async def archive(self, product_path: Path, archive_path: Path) -> ArchiveResult:
        """
        Archive product_path into archive_path

        Args:
            product_path: File or bundle to pack
            archive_path: Destination zip file

        Returns:
            ArchiveResult with archive_path set on success, None on failure
        """
        result = ArchiveResult(status=OperationStatus.IN_PROGRESS)
        command = self.build_command(product_path, archive_path)
        logger.debug(f"Archiving {product_path} to {archive_path}")

        try:
            try:
                outcome = await run_process(command)
            except OSError as e:
                raise PackagingError(f"Failed to start {' '.join(command)}: {e}")

            if not outcome.succeeded:
                details = "\n".join(s for s in (outcome.stderr, outcome.stdout) if s)
                message = f"Command failed with exit code {outcome.exit_code}: {outcome.command_line}"
                if details:
                    message = f"{message}\n{details}"
                raise PackagingError(message)

        except PackagingError as e:
            self.reporter.error(e.message)
            result.add_error(e.error_code or ErrorCode.PACKAGING_FAILED, e.message)
            result.message = e.message
            result.complete(OperationStatus.FAILED)
            return result

        result.archive_path = Path(archive_path)
        result.message = f"Archive created at {archive_path}"
        result.complete(OperationStatus.SUCCESS)
        return result
