"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from flowdoc.config import Settings, settings
from flowdoc.llm.client import ReasoningClient


def get_settings() -> Settings:
    return settings


def get_reasoning_client(active: Settings = Depends(get_settings)) -> ReasoningClient:
    return ReasoningClient(active)
