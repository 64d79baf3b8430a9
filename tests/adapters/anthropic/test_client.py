from __future__ import annotations

import asyncio
import base64
import json
from collections.abc import Callable  # noqa: TC003

import httpx
import pytest

from resumevault.adapters.anthropic import AnthropicResumeExtractor
from resumevault.adapters.http_resilience import ResilienceConfig, ResilientClient
from resumevault.config.extraction import ExtractionConfig
from resumevault.domain.errors import ExtractionError
from resumevault.domain.ports.extraction import ResumeDocument
from tests.helpers.resumes import sample_payload

DOCUMENT = ResumeDocument(name="jane.pdf", content=b"%PDF-1.4 sample")


def _make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig], ResilientClient]:
    def factory(resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, transport=httpx.MockTransport(handler))

    return factory


def _extractor(handler: Callable[[httpx.Request], httpx.Response]) -> AnthropicResumeExtractor:
    config = ExtractionConfig(
        api_key="sk-test",
        model="test-model",
        resilience=ResilienceConfig(name="anthropic-test", base_url="https://api.test"),
    )
    return AnthropicResumeExtractor(config=config, client_factory=_make_client_factory(handler))


def _message(text: str, *, stop_reason: str = "end_turn") -> dict[str, object]:
    return {
        "id": "msg_1",
        "type": "message",
        "role": "assistant",
        "model": "test-model",
        "content": [{"type": "text", "text": text}],
        "stop_reason": stop_reason,
    }


def test_extract_sends_document_and_parses_reply() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json=_message(json.dumps(sample_payload())))

    resume = asyncio.run(_extractor(handler).extract(DOCUMENT))

    assert resume.person is not None
    assert resume.person.email == "jane@example.com"
    assert len(resume.jobs) == 1

    request = captured[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.test/v1/messages"
    assert request.headers["x-api-key"] == "sk-test"
    assert request.headers["anthropic-version"] == "2023-06-01"
    body = json.loads(request.content)
    assert body["model"] == "test-model"
    assert body["max_tokens"] == 5000
    document_block, prompt_block = body["messages"][0]["content"]
    assert document_block["source"]["media_type"] == "application/pdf"
    assert base64.b64decode(document_block["source"]["data"]) == DOCUMENT.content
    assert prompt_block["type"] == "text"
    assert "associatedSkillTypeNames" in prompt_block["text"]


def test_extract_accepts_fenced_reply() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        fenced = "```json\n" + json.dumps(sample_payload()) + "\n```"
        return httpx.Response(200, json=_message(fenced))

    resume = asyncio.run(_extractor(handler).extract(DOCUMENT))

    assert len(resume.skills) == 2


def test_plain_text_documents_are_sent_as_text() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json=_message("{}"))

    document = ResumeDocument(name="cv.txt", content=b"Jane Doe", media_type="text/plain")
    asyncio.run(_extractor(handler).extract(document))

    source = json.loads(captured[0].content)["messages"][0]["content"][0]["source"]
    assert source == {"type": "text", "media_type": "text/plain", "data": "Jane Doe"}


def test_api_error_raises_extraction_error() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(
            529,
            json={"type": "error", "error": {"type": "overloaded_error", "message": "Overloaded"}},
        )

    with pytest.raises(ExtractionError) as excinfo:
        asyncio.run(_extractor(handler).extract(DOCUMENT))

    assert excinfo.value.status_code == 529
    assert excinfo.value.document_name == "jane.pdf"
    assert "Overloaded" in str(excinfo.value)


def test_transport_error_raises_extraction_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ExtractionError) as excinfo:
        asyncio.run(_extractor(handler).extract(DOCUMENT))

    assert excinfo.value.status_code is None


def test_truncated_reply_raises_extraction_error() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_message('{"person": {', stop_reason="max_tokens"))

    with pytest.raises(ExtractionError, match="max_tokens"):
        asyncio.run(_extractor(handler).extract(DOCUMENT))


@pytest.mark.parametrize(
    "text",
    [
        "Sorry, I cannot help with that.",
        "[1, 2, 3]",
        '{"jobs": "none"}',
    ],
)
def test_unusable_reply_raises_extraction_error(text: str) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_message(text))

    with pytest.raises(ExtractionError):
        asyncio.run(_extractor(handler).extract(DOCUMENT))


def test_non_json_response_body_raises_extraction_error() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>gateway</html>")

    with pytest.raises(ExtractionError):
        asyncio.run(_extractor(handler).extract(DOCUMENT))


def test_deeply_nested_reply_raises_extraction_error() -> None:
    nested = "[" * 200_000 + "]" * 200_000

    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_message(nested))

    with pytest.raises(ExtractionError, match="not valid JSON") as excinfo:
        asyncio.run(_extractor(handler).extract(DOCUMENT))

    assert excinfo.value.document_name == "jane.pdf"


def test_deeply_nested_response_body_raises_extraction_error() -> None:
    nested = b"[" * 200_000 + b"]" * 200_000

    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=nested)

    with pytest.raises(ExtractionError, match="Unexpected Messages API response"):
        asyncio.run(_extractor(handler).extract(DOCUMENT))
