"""Core domain types and logic."""

from .config import ReleaseContext
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ReleaseContext",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
