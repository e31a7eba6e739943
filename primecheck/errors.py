"""Failure taxonomy. Every error ends the invocation with ``exit_code``."""

from __future__ import annotations


class PrimeCheckError(Exception):
    exit_code = 1


class UsageError(PrimeCheckError):
    """Wrong argument count or an unparsable number."""


class ConfigurationError(PrimeCheckError):
    """Missing or empty credential."""


class TransportError(PrimeCheckError):
    """Network failure or deadline exceeded before a response arrived."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class UpstreamError(PrimeCheckError):
    """The endpoint answered, but with an application-level failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedAnswerError(PrimeCheckError):
    """The response text was not a bare yes or no."""

    def __init__(self, answer: str) -> None:
        super().__init__(f"Unexpected response from model: {answer!r}")
        self.answer = answer


__all__ = [
    "PrimeCheckError",
    "UsageError",
    "ConfigurationError",
    "TransportError",
    "UpstreamError",
    "MalformedAnswerError",
]
