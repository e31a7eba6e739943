"""Shared fixtures: a clean environment and an offline ChatCompleter."""

import asyncio
import logging

import pytest

from primecheck.client import Completion
from primecheck.diagnostics import LOGGER_NAME

ENV_VARS = (
    "OPENAI_API_KEY",
    "MAX_TIMEOUT_SECONDS",
    "LLM_MODEL",
    "OPENAI_BASE_URL",
    "LANGSMITH_TRACING",
    "LANGSMITH_API_KEY",
    "LANGSMITH_PROJECT",
    "LANGCHAIN_TRACING_V2",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # setenv first so monkeypatch remembers the original state and undoes
    # anything python-dotenv writes during the test.
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class FakeCompleter:
    def __init__(self, text: str = "yes", delay: float = 0.0, error: Exception | None = None):
        self.text = text
        self.delay = delay
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, prompt, *, api_key, timeout, max_tokens, temperature):
        self.calls.append(
            {
                "prompt": prompt,
                "api_key": api_key,
                "timeout": timeout,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return Completion(text=self.text, model="fake-model", prompt_tokens=42, completion_tokens=1, total_tokens=43)


@pytest.fixture
def make_completer():
    return FakeCompleter


@pytest.fixture(autouse=True)
def reset_diagnostics():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
