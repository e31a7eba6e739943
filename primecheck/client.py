"""Chat-completion capability and its OpenAI-backed implementation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx
from openai import APIConnectionError, APIError, APIStatusError, AsyncOpenAI

from primecheck.errors import TransportError, UpstreamError
from primecheck.utils.langsmith_wrapper import trace_llm_call

DEFAULT_MODEL = "gpt-3.5-turbo"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Completion:
    text: str
    model: str = ""
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatCompleter(Protocol):
    """Given a prompt, a credential and a deadline, return text or raise.

    Implementations raise TransportError when the exchange never completes
    and UpstreamError when the endpoint reports a failure.
    """

    async def complete(
        self,
        prompt: str,
        *,
        api_key: str,
        timeout: float,
        max_tokens: int,
        temperature: float,
    ) -> Completion: ...


def get_error_text(exc: APIStatusError) -> str:
    return exc.response.text if exc.response is not None else str(exc)


@trace_llm_call(name="prime-check", run_type="llm")
async def create_chat_completion(client: AsyncOpenAI, **api_params):
    return await client.chat.completions.create(**api_params)


class OpenAIChatCompleter:
    """ChatCompleter backed by the official ``openai`` SDK.

    SDK-level retries are disabled; one call means one HTTP request.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.model = model
        self.base_url = base_url
        self.http_client = http_client

    async def complete(
        self,
        prompt: str,
        *,
        api_key: str,
        timeout: float,
        max_tokens: int,
        temperature: float,
    ) -> Completion:
        logger.info("Initializing OpenAI client")
        async with AsyncOpenAI(
            api_key=api_key,
            base_url=self.base_url,
            timeout=timeout,
            max_retries=0,
            http_client=self.http_client,
        ) as client:
            logger.info(
                "Sending request to OpenAI API (model: %s, maxTokens: %d, temperature: %f)",
                self.model,
                max_tokens,
                temperature,
            )
            try:
                response = await create_chat_completion(
                    client,
                    model=self.model,
                    messages=[{"role": "user", "content": prompt}],
                    max_tokens=max_tokens,
                    temperature=temperature,
                )
            except APIConnectionError as exc:
                # APITimeoutError is a subclass and lands here too
                raise TransportError(f"OpenAI API request failed: {exc}", cause=exc) from exc
            except APIStatusError as exc:
                raise UpstreamError(
                    f"OpenAI API error ({exc.status_code}): {get_error_text(exc)}",
                    status_code=exc.status_code,
                ) from exc
            except APIError as exc:
                raise UpstreamError(f"OpenAI API error: {exc}") from exc

        if not response.choices:
            raise UpstreamError("OpenAI API returned no choices")

        usage = response.usage
        return Completion(
            text=response.choices[0].message.content or "",
            model=response.model or self.model,
            prompt_tokens=usage.prompt_tokens if usage else 0,
            completion_tokens=usage.completion_tokens if usage else 0,
            total_tokens=usage.total_tokens if usage else 0,
        )


__all__ = [
    "ChatCompleter",
    "Completion",
    "DEFAULT_MODEL",
    "OpenAIChatCompleter",
]
