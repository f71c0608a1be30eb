"""Business logic services for notarize-tool"""

from .config_service import ConfigService
from .notarize_service import NotarizeService

__all__ = [
    "ConfigService",
    "NotarizeService",
]
