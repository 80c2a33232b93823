"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image: str = Field(..., min_length=1, description="Base64-encoded raster image")
    mime_type: str | None = Field(
        default=None,
        alias="mimeType",
        description="Image MIME type (defaults to image/png)",
    )
