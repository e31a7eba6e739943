"""One bounded question to the model, and the yes/no that comes back."""

from __future__ import annotations

import asyncio
import logging
from time import perf_counter

from primecheck.client import ChatCompleter, Completion
from primecheck.errors import ConfigurationError, TransportError
from primecheck.normalizer import normalize_answer
from primecheck.prompts import build_prime_prompt

# Room for one word, not for an explanation.
MAX_TOKENS = 5
TEMPERATURE = 0.0

logger = logging.getLogger(__name__)


async def ask_is_prime(
    completer: ChatCompleter,
    number: int,
    *,
    api_key: str,
    timeout: float,
) -> Completion:
    """Issue exactly one request; the whole exchange shares one deadline."""
    if not api_key:
        raise ConfigurationError("OpenAI API key is empty")
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {timeout}")

    logger.info("Preparing prompt for number: %d", number)
    prompt = build_prime_prompt(number)
    logger.debug("Using prompt: %r", prompt)

    logger.info("Creating request deadline: %s seconds", timeout)
    started = perf_counter()
    try:
        completion = await asyncio.wait_for(
            completer.complete(
                prompt,
                api_key=api_key,
                timeout=timeout,
                max_tokens=MAX_TOKENS,
                temperature=TEMPERATURE,
            ),
            timeout,
        )
    except asyncio.TimeoutError as exc:
        raise TransportError(f"request exceeded the {timeout} second deadline", cause=exc) from exc
    finally:
        logger.info("OpenAI API request completed in %.3fs", perf_counter() - started)

    logger.info("Raw response from model: %r", completion.text)
    logger.info(
        "Token usage - Prompt: %d, Completion: %d, Total: %d",
        completion.prompt_tokens,
        completion.completion_tokens,
        completion.total_tokens,
    )
    return completion


def check_prime(
    number: int,
    *,
    api_key: str,
    timeout: float,
    completer: ChatCompleter,
) -> str:
    """Return ``"yes"`` or ``"no"`` as answered by the model for *number*."""
    logger.info("Checking if %d is prime using %s", number, type(completer).__name__)
    completion = asyncio.run(ask_is_prime(completer, number, api_key=api_key, timeout=timeout))
    answer = normalize_answer(completion.text)
    if answer == "yes":
        logger.info("Confirmed: %d is prime", number)
    else:
        logger.info("Confirmed: %d is not prime", number)
    return answer


__all__ = ["MAX_TOKENS", "TEMPERATURE", "ask_is_prime", "check_prime"]
