"""API key materialization"""

import logging
import os
from pathlib import Path

from ..api.exceptions import CredentialWriteError
from ..constants import CREDENTIAL_FILE_MODE

logger = logging.getLogger(__name__)


class CredentialMaterializer:
    """Writes the App Store Connect API key where notarytool can read it"""

    def __init__(self, credential_path: Path):
        self.credential_path = Path(credential_path)

    def materialize(self, api_key: bytes) -> Path:
        """
        Write the key verbatim, replacing any existing content

        Args:
            api_key: Raw key material

        Returns:
            Path of the written file

        Raises:
            CredentialWriteError: If the file cannot be written
        """
        path = self.credential_path
        try:
            fd = os.open(str(path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, CREDENTIAL_FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(api_key)
        except OSError as e:
            raise CredentialWriteError(str(path), e.strerror or str(e))

        logger.debug(f"API key written to {path}")
        return path
