"""Image → outcome: build, send once, classify."""

from __future__ import annotations

from flowdoc.llm.client import ReasoningClient
from flowdoc.llm.request_builder import build_request
from flowdoc.llm.response_handler import Outcome, handle_response


async def analyze_image(
    client: ReasoningClient,
    image: bytes | str | None,
    mime_type: str | None = None,
) -> Outcome:
    """Run one analysis. Raises InvalidInput / MissingCredentials before any network call."""
    request = build_request(image, mime_type, settings=client.settings)
    response = await client.send(request)
    return handle_response(response)
