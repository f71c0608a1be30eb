"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Any


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"
    IN_PROGRESS = "in_progress"


class PipelineStage(Enum):
    """Stages of a notarization run"""
    CONFIGURING = "configuring"
    ARCHIVING = "archiving"
    SUBMITTING = "submitting"
    DONE = "done"
    FAILED = "failed"


class FailureKind(Enum):
    """Why a notarization run failed"""
    CONFIGURATION = "configuration"
    PACKAGING = "packaging"
    PRECONDITION = "precondition"
    SUBMISSION = "submission"
    UNEXPECTED = "unexpected"


@dataclass
class ErrorDetail:
    """Detailed error information"""

    code: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }


@dataclass
class Result:
    """Base result class"""

    status: OperationStatus
    message: str = ""
    errors: List[ErrorDetail] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    start_time: datetime = field(default_factory=datetime.utcnow)
    end_time: Optional[datetime] = None

    @property
    def is_success(self) -> bool:
        """Check if operation was successful"""
        return self.status == OperationStatus.SUCCESS

    @property
    def is_failed(self) -> bool:
        """Check if operation failed"""
        return self.status == OperationStatus.FAILED

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def add_error(self, code: str, message: str, **context) -> None:
        """Add an error"""
        self.errors.append(ErrorDetail(code=code, message=message, context=context))

    def complete(self, status: Optional[OperationStatus] = None) -> None:
        """Mark operation as complete"""
        self.end_time = datetime.utcnow()
        if status:
            self.status = status


@dataclass
class ArchiveResult(Result):
    """Result of the archiving stage

    A failed archive carries no path. Failure is signalled through the
    status, never by raising.
    """

    archive_path: Optional[Path] = None

    @property
    def archive_size(self) -> Optional[int]:
        """Get archive size if available"""
        if self.archive_path and Path(self.archive_path).exists():
            return Path(self.archive_path).stat().st_size
        return None


@dataclass
class SubmissionResult(Result):
    """Result of a notarization submission"""

    exit_code: Optional[int] = None
    stdout: str = ""
    stderr: str = ""


@dataclass
class NotarizeResult(Result):
    """Result of a complete notarization run"""

    stage: PipelineStage = PipelineStage.CONFIGURING
    failure_kind: Optional[FailureKind] = None
    product_path: Optional[Path] = None
    archive_path: Optional[Path] = None
    submission: Optional[SubmissionResult] = None
    outputs: Dict[str, str] = field(default_factory=dict)

    def fail(self, kind: FailureKind, message: str, code: str) -> None:
        """Move to the failed stage"""
        self.failure_kind = kind
        self.message = message
        self.add_error(code, message, stage=self.stage.value)
        self.stage = PipelineStage.FAILED
        self.complete(OperationStatus.FAILED)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "status": self.status.value,
            "stage": self.stage.value,
            "message": self.message,
            "product_path": str(self.product_path) if self.product_path else None,
            "outputs": self.outputs,
            "errors": [e.to_dict() for e in self.errors],
            "duration": self.duration
        }

        if self.failure_kind:
            data["failure_kind"] = self.failure_kind.value
        if self.submission:
            data["submission"] = {
                "exit_code": self.submission.exit_code,
                "stdout": self.submission.stdout,
                "stderr": self.submission.stderr,
            }

        return data
