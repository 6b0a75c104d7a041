"""Error taxonomy shared by every verifier component."""

from __future__ import annotations

from typing import Optional


class QuotesVerifierError(Exception):
    """Base class for all verifier failures."""


class InvalidArgumentError(QuotesVerifierError, ValueError):
    """Raised when a value falls outside an enumerated domain."""


class PreconditionViolationError(QuotesVerifierError, AssertionError):
    """Raised when an operation is invoked in a contradicting session state."""


class ElementNotFoundError(QuotesVerifierError, LookupError):
    """Raised when an expected DOM element is absent."""

    def __init__(self, description: str, url: Optional[str] = None) -> None:
        self.description = description
        self.url = url
        message = description if not url else f"{description} (URL: {url})"
        super().__init__(message)


class EmptyResultSetError(ElementNotFoundError):
    """Raised when a collection that must not be empty has no members."""


class WaitTimeoutError(QuotesVerifierError, TimeoutError):
    """Raised when a bounded poll does not observe the expected state."""

    def __init__(self, description: str, timeout: float) -> None:
        self.description = description
        self.timeout = timeout
        super().__init__(f"Timed out after {timeout:g}s waiting for {description}")


class TypeMismatchError(QuotesVerifierError, TypeError):
    """Raised when a non-boolean outcome is recorded into the action log."""
