"""Classifies a reasoning service reply into exactly one terminal outcome.

    Sent ─┬─ non-2xx ─────────────────────────► UpstreamError
          ├─ 2xx, content not strict JSON ─────► Unparseable  (soft, 200)
          └─ 2xx, content decodes ─────────────► Validated    (forwarded as-is)

There is no retry, backoff or accumulation across calls. Schema checks on a
Validated payload are advisory: they are logged and attached, never used to
reclassify or rewrite the result.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Union

from flowdoc.errors import FormatError, ResponseEnvelopeError
from flowdoc.llm.client import ServiceResponse
from flowdoc.models.schema import check_result

logger = logging.getLogger(__name__)

UNPARSEABLE_WARNING = "Could not parse structured JSON — raw AI output attached"
UPSTREAM_ERROR_MESSAGE = "Reasoning service error"


@dataclass(frozen=True)
class UpstreamError:
    status_code: int
    body: str

    def to_http(self) -> tuple[int, dict[str, Any]]:
        return self.status_code, {"error": UPSTREAM_ERROR_MESSAGE, "details": self.body}


@dataclass(frozen=True)
class Unparseable:
    raw: Any
    warning: str = UNPARSEABLE_WARNING

    def to_http(self) -> tuple[int, dict[str, Any]]:
        return 200, {"warning": self.warning, "raw": self.raw}


@dataclass(frozen=True)
class Validated:
    result: Any
    issues: list[str] = field(default_factory=list)

    def to_http(self) -> tuple[int, Any]:
        return 200, self.result


Outcome = Union[UpstreamError, Unparseable, Validated]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} overflows a finite float")
    return value


def decode_strict(raw: Any) -> Any:
    """Strict JSON decoding: str input only, finite numbers only."""
    if not isinstance(raw, str):
        raise FormatError(f"content is {type(raw).__name__}, not a JSON string")
    try:
        return json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as e:
        raise FormatError(str(e)) from e


def extract_content(envelope: Any) -> Any:
    """choices[0].message.content of a chat completions body, or None."""
    if not isinstance(envelope, dict):
        return None
    choices = envelope.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    return message.get("content")


def handle_response(response: ServiceResponse) -> Outcome:
    if not response.ok:
        logger.warning("Reasoning service failed with %d: %s", response.status_code, response.text[:200])
        return UpstreamError(status_code=response.status_code, body=response.text)

    try:
        envelope = response.json()
    except ValueError as e:
        raise ResponseEnvelopeError(f"reasoning service body is not JSON: {e}") from e

    raw = extract_content(envelope)
    try:
        decoded = decode_strict(raw)
    except FormatError as e:
        logger.warning("Model output is not valid JSON (%s), returning raw text", e)
        return Unparseable(raw=raw)

    issues = check_result(decoded)
    if issues:
        logger.warning(
            "Model output violates the result contract (%d issues): %s",
            len(issues),
            "; ".join(issues[:5]),
        )
    return Validated(result=decoded, issues=issues)
