"""Data models for notarize-tool"""

from .config import Credentials, SubmissionConfig
from .result import (
    OperationStatus,
    PipelineStage,
    FailureKind,
    ErrorDetail,
    Result,
    ArchiveResult,
    SubmissionResult,
    NotarizeResult,
)

__all__ = [
    # Config models
    "Credentials",
    "SubmissionConfig",

    # Result models
    "OperationStatus",
    "PipelineStage",
    "FailureKind",
    "ErrorDetail",
    "Result",
    "ArchiveResult",
    "SubmissionResult",
    "NotarizeResult",
]
