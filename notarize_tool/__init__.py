"""Notarize Tool - Submit macOS products to Apple's notary service.

Archives an application bundle, submits it with notarytool using App Store
Connect API credentials, waits for the verdict and reports the outcome.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Core API
from .api.notarizer import Notarizer, notarize

# Data models
from .models.config import Credentials, SubmissionConfig
from .models.result import NotarizeResult, FailureKind, PipelineStage

# Exceptions
from .api.exceptions import (
    NotarizeToolError,
    ConfigError,
    MissingInputError,
    ProductNotFoundError,
    CredentialWriteError,
    PackagingError,
    PreconditionError,
    SubmissionError,
    SubmissionTimeoutError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "Notarizer",

    # Core API functions
    "notarize",

    # Data models
    "Credentials",
    "SubmissionConfig",
    "NotarizeResult",
    "FailureKind",
    "PipelineStage",

    # Exceptions
    "NotarizeToolError",
    "ConfigError",
    "MissingInputError",
    "ProductNotFoundError",
    "CredentialWriteError",
    "PackagingError",
    "PreconditionError",
    "SubmissionError",
    "SubmissionTimeoutError",
]
