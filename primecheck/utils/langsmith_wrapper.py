"""LangSmith hooks for the OpenAI calls.

``traceable`` records runs only when ``LANGSMITH_TRACING`` is on (see
``primecheck.config.configure_tracing``); otherwise it calls straight through.
"""
from typing import Callable, Optional

from langsmith import traceable


def trace_llm_call(func: Callable = None, *, run_type: str = "llm", name: Optional[str] = None):
    """
    Decorator to trace LLM function calls with LangSmith using @traceable.
    Works on both sync and async callables.

    Usage:
        @trace_llm_call
        async def create_completion(client, **params):
            return await client.chat.completions.create(**params)

        # Or with custom name:
        @trace_llm_call(name="prime-check", run_type="llm")
        async def create_completion(client, **params):
            ...
    """

    def decorator(f):
        return traceable(name=name or f.__name__, run_type=run_type)(f)

    # Support both @trace_llm_call and @trace_llm_call()
    if func is not None:
        return decorator(func)
    return decorator


__all__ = ["trace_llm_call"]
