"""Configuration data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

from ..api.exceptions import ConfigError, MissingInputError, ProductNotFoundError
from ..constants import (
    DEFAULT_WAIT_TIMEOUT,
    INPUT_API_ISSUER,
    INPUT_API_KEY,
    INPUT_API_KEY_ID,
    INPUT_PASSWORD,
    INPUT_PRIMARY_BUNDLE_ID,
    INPUT_PRODUCT_PATH,
    INPUT_USERNAME,
    INPUT_VERBOSE,
    INPUT_WAIT_TIMEOUT,
    REQUIRED_INPUTS,
    TRUE_STRING,
)


def parse_verbose(value: Any) -> bool:
    """Only the exact string "true" (or a real boolean) turns verbose on"""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip() == TRUE_STRING


def parse_wait_timeout(value: Any) -> float:
    """Parse the caller-side wait timeout in seconds"""
    if value is None or value == "":
        return float(DEFAULT_WAIT_TIMEOUT)
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid {INPUT_WAIT_TIMEOUT}: {value}")
    if timeout <= 0:
        raise ConfigError(f"Invalid {INPUT_WAIT_TIMEOUT}: {value} (must be positive)")
    return timeout


@dataclass(frozen=True)
class Credentials:
    """App Store Connect API credentials"""

    api_key: bytes = field(repr=False)
    api_key_id: str
    api_issuer: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Credentials':
        """Create from an inputs dictionary"""
        api_key = data[INPUT_API_KEY]
        if isinstance(api_key, str):
            api_key = api_key.encode("utf-8")
        return cls(
            api_key=api_key,
            api_key_id=str(data[INPUT_API_KEY_ID]),
            api_issuer=str(data[INPUT_API_ISSUER]),
        )


@dataclass(frozen=True)
class SubmissionConfig:
    """Immutable settings for one notarization run

    The product path is checked for existence at construction time.
    Username, password and primary bundle id are accepted for
    compatibility with older workflows but take no part in submission.
    """

    product_path: Path
    credentials: Credentials
    verbose: bool = False
    wait_timeout: float = float(DEFAULT_WAIT_TIMEOUT)

    # Accepted but unused
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    primary_bundle_id: Optional[str] = None

    def __post_init__(self):
        """Validate product path"""
        if not Path(self.product_path).exists():
            raise ProductNotFoundError(str(self.product_path))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SubmissionConfig':
        """Create from an inputs dictionary keyed by input name

        Raises:
            MissingInputError: If a required input is absent or empty
            ProductNotFoundError: If the product path does not exist
            ConfigError: If an input has an invalid value
        """
        for name in REQUIRED_INPUTS:
            value = data.get(name)
            if value is None or value == "" or value == b"":
                raise MissingInputError(name)

        return cls(
            product_path=Path(data[INPUT_PRODUCT_PATH]),
            credentials=Credentials.from_dict(data),
            verbose=parse_verbose(data.get(INPUT_VERBOSE)),
            wait_timeout=parse_wait_timeout(data.get(INPUT_WAIT_TIMEOUT)),
            username=data.get(INPUT_USERNAME) or None,
            password=data.get(INPUT_PASSWORD) or None,
            primary_bundle_id=data.get(INPUT_PRIMARY_BUNDLE_ID) or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary without secrets"""
        data = {
            "product_path": str(self.product_path),
            "api_key_id": self.credentials.api_key_id,
            "api_issuer": self.credentials.api_issuer,
            "verbose": self.verbose,
            "wait_timeout": self.wait_timeout,
        }
        if self.username:
            data["username"] = self.username
        if self.primary_bundle_id:
            data["primary_bundle_id"] = self.primary_bundle_id
        return data
