"""Health check + meta endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from flowdoc.config import Settings
from flowdoc.dependencies import get_settings
from flowdoc.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(active: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        model=active.reasoning_model,
        configured=bool(active.groq_api_key),
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from flowdoc.llm.prompts import get_all_templates

    return get_all_templates()


@router.get("/schema")
async def schema() -> dict[str, Any]:
    from flowdoc.models.schema import json_schema

    return json_schema()
