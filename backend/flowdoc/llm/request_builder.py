"""Builds the single-shot analysis request sent to the reasoning service."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage, convert_to_openai_messages

from flowdoc.config import Settings, settings as default_settings
from flowdoc.errors import InvalidInput
from flowdoc.llm.prompts import SYSTEM_PROMPT, USER_INSTRUCTION

DEFAULT_MIME_TYPE = "image/png"

# Fixed policy: structure over variety. Not caller-configurable.
TEMPERATURE = 0.2
MAX_TOKENS = 4096
RESPONSE_FORMAT = {"type": "json_object"}


@dataclass(frozen=True)
class ExternalRequest:
    """Outbound request descriptor. Building one has no side effects."""

    url: str
    model: str
    messages: tuple[BaseMessage, ...]
    temperature: float = TEMPERATURE
    max_tokens: int = MAX_TOKENS
    response_format: dict[str, str] = field(default_factory=lambda: dict(RESPONSE_FORMAT))

    def payload(self) -> dict[str, Any]:
        """OpenAI-compatible chat completions body."""
        return {
            "model": self.model,
            "messages": convert_to_openai_messages(list(self.messages)),
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "response_format": dict(self.response_format),
        }


def image_data_uri(image: bytes | str, mime_type: str) -> str:
    """data:<mime>;base64,<payload> — str input is taken as already base64-encoded."""
    if isinstance(image, bytes):
        payload = base64.b64encode(image).decode("ascii")
    else:
        payload = image
    return f"data:{mime_type};base64,{payload}"


def build_request(
    image: bytes | str | None,
    mime_type: str | None = None,
    *,
    settings: Settings | None = None,
) -> ExternalRequest:
    """Package an image into a system-instruction + image message pair.

    The payload is not inspected: a malformed image is the reasoning service's
    problem, only a missing one is rejected here.
    """
    if image is None or len(image) == 0:
        raise InvalidInput("Missing `image` field (base64 string)")

    active = settings or default_settings
    mime = mime_type or DEFAULT_MIME_TYPE

    messages = (
        SystemMessage(content=SYSTEM_PROMPT),
        HumanMessage(
            content=[
                {
                    "type": "image_url",
                    "image_url": {"url": image_data_uri(image, mime)},
                },
                {
                    "type": "text",
                    "text": USER_INSTRUCTION,
                },
            ]
        ),
    )

    return ExternalRequest(
        url=active.reasoning_api_url,
        model=active.reasoning_model,
        messages=messages,
    )
