"""POST /api/analyze — flowchart image → structured flow description."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from flowdoc.config import Settings
from flowdoc.dependencies import get_reasoning_client, get_settings
from flowdoc.errors import InvalidInput, MissingCredentials
from flowdoc.llm.analyzer import analyze_image
from flowdoc.llm.client import ReasoningClient
from flowdoc.models.requests import AnalyzeRequest
from flowdoc.models.responses import ErrorResponse

router = APIRouter()
logger = logging.getLogger(__name__)

MISSING_IMAGE_ERROR = "Missing `image` field (base64 string)"

_PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(body, status_code=status_code)


def _parse_body(body: Any) -> AnalyzeRequest | JSONResponse:
    if not isinstance(body, dict):
        return _error(400, "Invalid JSON body")
    try:
        return AnalyzeRequest.model_validate(body)
    except ValidationError as e:
        if any(err["loc"][:1] == ("image",) for err in e.errors()):
            return _error(400, MISSING_IMAGE_ERROR)
        return _error(400, "Invalid request body", str(e))


@router.options("/analyze")
async def analyze_preflight(active: Settings = Depends(get_settings)) -> Response:
    headers = {"Access-Control-Allow-Origin": active.cors_allow_origin, **_PREFLIGHT_HEADERS}
    return Response(status_code=200, headers=headers)


@router.api_route("/analyze", methods=["GET", "PUT", "PATCH", "DELETE"])
async def analyze_method_not_allowed() -> JSONResponse:
    return _error(405, "Method not allowed")


@router.post("/analyze")
async def analyze(
    request: Request,
    client: ReasoningClient = Depends(get_reasoning_client),
) -> JSONResponse:
    try:
        body = await request.json()
    except ValueError:
        return _error(400, "Invalid JSON body")

    parsed = _parse_body(body)
    if isinstance(parsed, JSONResponse):
        return parsed

    try:
        outcome = await analyze_image(client, parsed.image, parsed.mime_type)
        status_code, content = outcome.to_http()
        return JSONResponse(content, status_code=status_code)
    except InvalidInput as e:
        return _error(400, str(e))
    except MissingCredentials as e:
        logger.error("Analysis rejected: %s", e)
        return _error(500, str(e))
    except Exception as e:
        logger.exception("Analysis failed")
        return _error(500, "Internal server error", str(e))
