"""API layer for notarize-tool"""

from .exceptions import (
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
from .notarizer import Notarizer, notarize

__all__ = [
    # Main classes
    "Notarizer",

    # Convenience functions
    "notarize",

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
