"""Reasoning service transport — one POST per analysis, no retries."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from flowdoc.config import Settings
from flowdoc.errors import MissingCredentials
from flowdoc.llm.request_builder import ExternalRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceResponse:
    """Raw reasoning service reply: status plus body text, uninterpreted."""

    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.text)


class ReasoningClient:
    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def configured(self) -> bool:
        return bool(self._settings.groq_api_key)

    async def send(self, request: ExternalRequest) -> ServiceResponse:
        """POST the request once. Transport errors propagate to the caller."""
        if not self.configured:
            raise MissingCredentials("GROQ_API_KEY not configured on server")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._settings.groq_api_key}",
        }

        async with httpx.AsyncClient(
            timeout=self._settings.reasoning_timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.post(request.url, json=request.payload(), headers=headers)

        logger.info("Reasoning service %s replied %d (%d bytes)", request.model, response.status_code, len(response.content))
        return ServiceResponse(status_code=response.status_code, text=response.text)
