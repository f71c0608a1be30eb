"""Exception definitions for notarize-tool API"""

from typing import Optional

from ..constants import ErrorCode


class NotarizeToolError(Exception):
    """Base exception for notarize-tool"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigError(NotarizeToolError):
    """Configuration error"""

    def __init__(self, message: str, error_code: str = ErrorCode.CONFIG_ERROR):
        super().__init__(message, error_code)


class MissingInputError(ConfigError):
    """Required input not supplied"""

    def __init__(self, input_name: str):
        super().__init__(
            f"Input required and not supplied: {input_name}",
            ErrorCode.MISSING_INPUT
        )
        self.input_name = input_name


class ProductNotFoundError(ConfigError):
    """Product path does not exist"""

    def __init__(self, product_path: str):
        super().__init__(
            f"Product path {product_path} does not exist.",
            ErrorCode.PRODUCT_NOT_FOUND
        )
        self.product_path = product_path


class CredentialWriteError(ConfigError):
    """API key could not be written to disk"""

    def __init__(self, credential_path: str, reason: str):
        super().__init__(
            f"Unable to write API key to {credential_path}: {reason}",
            ErrorCode.CREDENTIAL_WRITE_FAILED
        )
        self.credential_path = credential_path


class PackagingError(NotarizeToolError):
    """Archiving tool failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.PACKAGING_FAILED)


class PreconditionError(NotarizeToolError):
    """Product disappeared before submission"""

    def __init__(self, product_path: str):
        super().__init__(
            f"No product could be found at {product_path}",
            ErrorCode.PRECONDITION_FAILED
        )
        self.product_path = product_path


class SubmissionError(NotarizeToolError):
    """Notarization tool reported a failure

    The message is the tool's standard output and standard error joined
    by a newline.
    """

    def __init__(self,
                 stdout: str,
                 stderr: str,
                 exit_code: Optional[int] = None,
                 error_code: str = ErrorCode.SUBMISSION_FAILED):
        super().__init__(f"{stdout}\n{stderr}", error_code)
        self.stdout = stdout
        self.stderr = stderr
        self.exit_code = exit_code


class SubmissionTimeoutError(SubmissionError):
    """Notarization tool did not finish within the wait timeout"""

    def __init__(self, timeout: float, stdout: str = "", stderr: str = ""):
        note = f"Submission did not complete within {timeout:g} seconds"
        stderr = f"{stderr}\n{note}" if stderr else note
        super().__init__(stdout, stderr, None, ErrorCode.SUBMISSION_TIMEOUT)
        self.timeout = timeout
