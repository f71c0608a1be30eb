"""CLI utility functions"""

from .output import (
    console,
    err_console,
    format_notarize_result,
    format_json,
)

__all__ = [
    'console',
    'err_console',
    'format_notarize_result',
    'format_json',
]
