"""Canvas host data — selection nodes, export artifacts, checkpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CanvasNode(BaseModel):
    id: str
    name: str
    type: str  # host node type, e.g. FRAME, GROUP, RECTANGLE


class ExportSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    format: str = "PNG"
    scale: float = 2.0


class ExportArtifact(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base64: str
    node_count: int = Field(alias="nodeCount")


class ExportError(BaseModel):
    model_config = ConfigDict(frozen=True)

    error: str


class VersionCheckpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    description: str


class VersionError(BaseModel):
    model_config = ConfigDict(frozen=True)

    error: str
