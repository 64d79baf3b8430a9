"""HTTP client for the Anthropic Messages API."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from resumevault.adapters.http_resilience import ResilientClient
from resumevault.config.extraction import ExtractionConfig, get_extraction_config
from resumevault.domain.errors import ExtractionError
from resumevault.domain.ports.extraction import ResumeExtractor

from .prompts import SYSTEM_PROMPT, USER_PROMPT
from .schema import ErrorResponse, MessagesResponse
from .translator import extract_json, parse_extracted_resume

if TYPE_CHECKING:
    from collections.abc import Callable

    from resumevault.config.http_resilience import ResilienceConfig
    from resumevault.domain.ports.extraction import ResumeDocument
    from resumevault.domain.reconciliation.facts import ExtractedResume

log = getLogger(__name__)

MESSAGES_PATH = "/v1/messages"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def _document_block(document: ResumeDocument) -> dict[str, object]:
    if document.media_type == "text/plain":
        return {
            "type": "document",
            "source": {
                "type": "text",
                "media_type": "text/plain",
                "data": document.content.decode("utf-8", errors="replace"),
            },
        }
    return {
        "type": "document",
        "source": {
            "type": "base64",
            "media_type": document.media_type,
            "data": base64.b64encode(document.content).decode("ascii"),
        },
    }


def _error_message(response: httpx.Response) -> str:
    try:
        return ErrorResponse.model_validate(response.json()).error.message
    except (ValueError, RecursionError):
        return response.text or response.reason_phrase


@dataclass(slots=True)
class AnthropicResumeExtractor:
    """Send one document per request and translate the JSON reply into facts."""

    config: ExtractionConfig = field(default_factory=get_extraction_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def build_request(self, document: ResumeDocument) -> dict[str, object]:
        return {
            "model": self.config.model,
            "max_tokens": self.config.max_tokens,
            "system": SYSTEM_PROMPT,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        _document_block(document),
                        {"type": "text", "text": USER_PROMPT},
                    ],
                }
            ],
        }

    def _headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.config.api_key,
            "anthropic-version": self.config.api_version,
            "content-type": "application/json",
        }

    async def extract(self, document: ResumeDocument) -> ExtractedResume:
        reply = await self._request_message(document)

        if reply.stop_reason != "end_turn":
            raise ExtractionError(
                f"Extraction of {document.name} stopped early: {reply.stop_reason}",
                document_name=document.name,
            )

        try:
            payload = extract_json(reply.text)
        except (ValueError, RecursionError) as exc:
            raise ExtractionError(
                f"Reply for {document.name} is not valid JSON: {exc}",
                document_name=document.name,
            ) from exc

        if not isinstance(payload, dict):
            raise ExtractionError(
                f"Reply for {document.name} is not a JSON object", document_name=document.name
            )

        try:
            resume = parse_extracted_resume(payload)
        except ValidationError as exc:
            raise ExtractionError(
                f"Reply for {document.name} does not match the resume schema: {exc}",
                document_name=document.name,
            ) from exc

        log.info(
            "Extracted %s: %s jobs, %s skills, person=%s",
            document.name,
            len(resume.jobs),
            len(resume.skills),
            "yes" if resume.person is not None else "no",
        )
        return resume

    async def _request_message(self, document: ResumeDocument) -> MessagesResponse:
        try:
            async with self.client_factory(self.config.resilience) as client:
                response = await client.post(
                    MESSAGES_PATH,
                    json=self.build_request(document),
                    headers=self._headers(),
                )
        except httpx.HTTPError as exc:
            log.error(f"Extraction request for {document.name} failed: {exc}")  # noqa: TRY400
            raise ExtractionError(
                f"Extraction request for {document.name} failed: {exc}",
                document_name=document.name,
            ) from exc

        if response.is_error:
            message = _error_message(response)
            log.error(f"Extraction API error {response.status_code}: {message}")
            raise ExtractionError(
                f"Extraction API returned {response.status_code} for {document.name}: {message}",
                document_name=document.name,
                status_code=response.status_code,
            )

        try:
            return MessagesResponse.model_validate(response.json())
        except (ValueError, RecursionError) as exc:
            raise ExtractionError(
                f"Unexpected Messages API response for {document.name}",
                document_name=document.name,
                status_code=response.status_code,
            ) from exc


if TYPE_CHECKING:
    _extractor_check: ResumeExtractor = AnthropicResumeExtractor()
