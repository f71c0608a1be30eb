"""CLI commands"""

from . import submit
from . import doctor

__all__ = [
    "submit",
    "doctor",
]
