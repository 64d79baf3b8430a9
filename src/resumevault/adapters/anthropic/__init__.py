"""Public interface for the Anthropic extraction adapter."""

from __future__ import annotations

from .client import AnthropicResumeExtractor
from .schema import MessagesResponse, ResumePayload, ResumePayloadInput
from .translator import extract_json, parse_extracted_resume

__all__ = [
    "AnthropicResumeExtractor",
    "MessagesResponse",
    "ResumePayload",
    "ResumePayloadInput",
    "extract_json",
    "parse_extracted_resume",
]
