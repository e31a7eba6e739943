import asyncio
import json

import httpx
import pytest

from primecheck.client import OpenAIChatCompleter
from primecheck.errors import TransportError, UpstreamError


def _payload(content="Yes", choices=True):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "gpt-3.5-turbo-0125",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ]
        if choices
        else [],
        "usage": {"prompt_tokens": 80, "completion_tokens": 1, "total_tokens": 81},
    }


def _completer(handler, model="gpt-3.5-turbo"):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OpenAIChatCompleter(model=model, base_url="https://llm.test/v1", http_client=http_client)


def _complete(completer):
    return asyncio.run(
        completer.complete("Is 17 prime?", api_key="sk-test", timeout=5, max_tokens=5, temperature=0.0)
    )


def test_sends_single_chat_request():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=_payload())

    completion = _complete(_completer(handler, model="gpt-4o-mini"))

    assert len(requests) == 1
    request = requests[0]
    assert request.url.path.endswith("/chat/completions")
    assert request.headers["authorization"] == "Bearer sk-test"
    body = json.loads(request.content)
    assert body["model"] == "gpt-4o-mini"
    assert body["messages"] == [{"role": "user", "content": "Is 17 prime?"}]
    assert body["max_tokens"] == 5
    assert body["temperature"] == 0.0

    assert completion.text == "Yes"
    assert completion.model == "gpt-3.5-turbo-0125"
    assert (completion.prompt_tokens, completion.completion_tokens, completion.total_tokens) == (80, 1, 81)


def test_null_content_becomes_empty_text():
    completion = _complete(_completer(lambda request: httpx.Response(200, json=_payload(content=None))))
    assert completion.text == ""


def test_no_choices_is_upstream_error():
    with pytest.raises(UpstreamError, match="no choices"):
        _complete(_completer(lambda request: httpx.Response(200, json=_payload(choices=False))))


@pytest.mark.parametrize("status", [400, 401, 429, 500, 503])
def test_error_status_is_upstream_error_without_retry(status):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(status, json={"error": {"message": "boom", "type": "server_error"}})

    with pytest.raises(UpstreamError) as excinfo:
        _complete(_completer(handler))
    assert excinfo.value.status_code == status
    assert len(requests) == 1


@pytest.mark.parametrize(
    "exc",
    [httpx.ConnectError("connection refused"), httpx.ReadTimeout("read timed out")],
)
def test_transport_failures_are_transport_errors(exc):
    def handler(request):
        raise exc

    with pytest.raises(TransportError) as excinfo:
        _complete(_completer(handler))
    assert excinfo.value.cause is not None
