"""Per-run scratch directory for credential and archive files"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from ..constants import ARCHIVE_FILE_NAME, CREDENTIAL_FILE_NAME, WORKSPACE_PREFIX

logger = logging.getLogger(__name__)


class Workspace:
    """Unique private temporary directory owned by one notarization run

    Usage:
        with Workspace() as workspace:
            workspace.credential_path
            workspace.archive_path

    The directory and everything in it is removed when the block exits,
    whether it exits normally or by exception.
    """

    def __init__(self, parent: Optional[Path] = None):
        """
        Initialize workspace

        Args:
            parent: Directory to create the workspace in (default: system temp dir)
        """
        self.parent = Path(parent) if parent else None
        self._root: Optional[Path] = None

    @property
    def root(self) -> Path:
        """Workspace directory"""
        if self._root is None:
            raise RuntimeError("Workspace is not open")
        return self._root

    @property
    def credential_path(self) -> Path:
        """Path of the API key file"""
        return self.root / CREDENTIAL_FILE_NAME

    @property
    def archive_path(self) -> Path:
        """Path of the product archive"""
        return self.root / ARCHIVE_FILE_NAME

    @property
    def is_open(self) -> bool:
        return self._root is not None

    def open(self) -> 'Workspace':
        """Create the directory (mode 0700)"""
        if self._root is None:
            self._root = Path(tempfile.mkdtemp(
                prefix=WORKSPACE_PREFIX,
                dir=str(self.parent) if self.parent else None
            ))
            logger.debug(f"Workspace created: {self._root}")
        return self

    def cleanup(self) -> None:
        """Remove the directory and its contents"""
        if self._root is None:
            return
        root, self._root = self._root, None
        shutil.rmtree(root, ignore_errors=True)
        logger.debug(f"Workspace removed: {root}")

    def __enter__(self) -> 'Workspace':
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cleanup()
