"""Notarizer API for notarization runs"""

import asyncio
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..constants import (
    INPUT_API_ISSUER,
    INPUT_API_KEY,
    INPUT_API_KEY_ID,
    INPUT_PRODUCT_PATH,
    INPUT_VERBOSE,
)
from ..core import Archiver, Reporter, Submitter
from ..models import NotarizeResult
from ..services.notarize_service import NotarizeService


class Notarizer:
    """Notarizer class for notarization runs"""

    def __init__(self,
                 reporter: Optional[Reporter] = None,
                 archive_tool: Optional[str] = None,
                 submit_tool: Optional[str] = None):
        """
        Initialize notarizer

        Args:
            reporter: Reporter for progress and failures
            archive_tool: Archiving program (default: ditto)
            submit_tool: Submission program (default: xcrun)
        """
        self.reporter = reporter or Reporter()

        archiver = Archiver(self.reporter, archive_tool) if archive_tool else None
        submitter = Submitter(self.reporter, submit_tool) if submit_tool else None

        self.service = NotarizeService(self.reporter, archiver=archiver, submitter=submitter)

    def notarize(self,
                 product_path: Union[str, Path],
                 api_key: Union[str, bytes],
                 api_key_id: str,
                 api_issuer: str,
                 verbose: bool = False,
                 **inputs) -> NotarizeResult:
        """
        Archive and submit a product, blocking until the verdict

        Args:
            product_path: Application bundle or file to notarize
            api_key: App Store Connect API key material
            api_key_id: API key identifier
            api_issuer: API issuer identifier
            verbose: Stream notarytool output live
            **inputs: Other inputs by name (e.g. "wait-timeout")

        Returns:
            NotarizeResult: Outcome of the run
        """
        run_inputs: Dict[str, Any] = dict(inputs)
        run_inputs.update({
            INPUT_PRODUCT_PATH: str(product_path),
            INPUT_API_KEY: api_key,
            INPUT_API_KEY_ID: api_key_id,
            INPUT_API_ISSUER: api_issuer,
            INPUT_VERBOSE: verbose,
        })

        return asyncio.run(self.service.run(run_inputs))


def notarize(product_path: Union[str, Path],
             api_key: Union[str, bytes],
             api_key_id: str,
             api_issuer: str,
             verbose: bool = False,
             **inputs) -> NotarizeResult:
    """
    Convenience function for notarization

    Example:
        result = notarize("build/MyApp.app", key, "ABC123", "issuer-uuid")
        if result.is_success:
            print(result.outputs["product-path"])
    """
    notarizer = Notarizer()
    return notarizer.notarize(product_path, api_key, api_key_id, api_issuer, verbose, **inputs)
