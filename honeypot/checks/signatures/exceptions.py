"""
Custom exceptions for the signature system.

Every error here is a configuration error: it is raised while signatures,
options or settings are being built, never while a request is evaluated.
"""

import logging

logger = logging.getLogger(__name__)


class HoneypotError(Exception):
    """Base exception for honeypot configuration errors."""

    def __init__(self, message: str, pattern: str = None):
        self.pattern = pattern
        super().__init__(message)
        logger.error(f"Honeypot configuration error: {message}")


class SignatureCompilationError(HoneypotError):
    """Raised when a signature pattern is not a valid regular expression."""

    def __init__(self, pattern: str, error: str):
        message = f"Failed to compile signature pattern {pattern!r}: {error}"
        super().__init__(message, pattern=pattern)


class AnchoringMismatchError(HoneypotError):
    """Raised when a signature's declared anchoring disagrees with its pattern."""

    def __init__(self, pattern: str, declared: str, actual: str):
        self.declared = declared
        self.actual = actual
        message = f"Signature {pattern!r} is declared {declared} but is written as {actual}"
        super().__init__(message, pattern=pattern)


class InvalidBlockStatusError(HoneypotError, ValueError):
    """Raised when the configured block status is not one of the allowed codes."""

    def __init__(self, status, allowed):
        self.status = status
        message = f"Block status {status!r} is not allowed (expected one of {sorted(allowed)})"
        super().__init__(message)
