"""Identifier generation errors."""

from utils.timestamp import format_timestamp


class BaseIdError(Exception):
    """Base error carrying a timestamp and context for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.timestamp}] {super().__str__()}"


class InvalidLengthError(BaseIdError, ValueError):
    """Requested identifier length is not a positive integer."""

    def __init__(self, message, length=None, **kwargs):
        context = kwargs.pop("context", {})
        context["length"] = repr(length)
        super().__init__(message, context=context, **kwargs)


class IdOverflowError(BaseIdError, OverflowError):
    """Same-millisecond capacity of a sortable generator is exhausted."""

    def __init__(self, message, timestamp_ms=None, **kwargs):
        context = kwargs.pop("context", {})
        if timestamp_ms is not None:
            context["timestamp_ms"] = timestamp_ms
        super().__init__(message, context=context, **kwargs)


class RandomSourceError(BaseIdError):
    """Secure random byte source failed or returned nothing."""

    def __init__(self, message, requested=None, **kwargs):
        context = kwargs.pop("context", {})
        if requested is not None:
            context["requested"] = requested
        super().__init__(message, context=context, **kwargs)
