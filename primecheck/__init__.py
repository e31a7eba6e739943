"""primecheck: ask a language model whether an integer is prime.

Exposes the pieces a caller needs to run a check without the CLI.
"""

from primecheck.client import ChatCompleter, Completion, OpenAIChatCompleter
from primecheck.errors import (
    ConfigurationError,
    MalformedAnswerError,
    PrimeCheckError,
    TransportError,
    UpstreamError,
    UsageError,
)
from primecheck.normalizer import normalize_answer
from primecheck.query import ask_is_prime, check_prime
from primecheck.validator import parse_number_args

__version__ = "0.1.0"

__all__ = [
    "ChatCompleter",
    "Completion",
    "OpenAIChatCompleter",
    "ConfigurationError",
    "MalformedAnswerError",
    "PrimeCheckError",
    "TransportError",
    "UpstreamError",
    "UsageError",
    "ask_is_prime",
    "check_prime",
    "normalize_answer",
    "parse_number_args",
]
