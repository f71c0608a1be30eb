"""Core functionality for notarize-tool"""

from .process import ProcessOutcome, ProcessTimeoutError, run_process
from .workspace import Workspace
from .credentials import CredentialMaterializer
from .reporter import Reporter
from .archiver import Archiver
from .submitter import Submitter

__all__ = [
    "ProcessOutcome",
    "ProcessTimeoutError",
    "run_process",
    "Workspace",
    "CredentialMaterializer",
    "Reporter",
    "Archiver",
    "Submitter",
]
