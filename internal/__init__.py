from internal.logging import LogLevel, StructuredLogger, get_logger
from core.errors import BaseIdError, IdOverflowError, InvalidLengthError, RandomSourceError

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "BaseIdError",
    "IdOverflowError",
    "InvalidLengthError",
    "RandomSourceError",
]
