"""Plugin session message protocol (UI ⇄ canvas side)."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from flowdoc.models.canvas import CanvasNode


class InboundType(str, Enum):
    EXPORT_SELECTION = "EXPORT_SELECTION"
    SAVE_VERSION = "SAVE_VERSION"
    GET_SELECTION_INFO = "GET_SELECTION_INFO"
    CLOSE = "CLOSE"


class OutboundMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_message(self) -> dict:
        return self.model_dump(by_alias=True)


class ExportSuccessMessage(OutboundMessage):
    type: Literal["EXPORT_SUCCESS"] = "EXPORT_SUCCESS"
    base64: str
    node_count: int = Field(alias="nodeCount")


class ExportErrorMessage(OutboundMessage):
    type: Literal["EXPORT_ERROR"] = "EXPORT_ERROR"
    error: str


class VersionSavedMessage(OutboundMessage):
    type: Literal["VERSION_SAVED"] = "VERSION_SAVED"
    label: str


class VersionErrorMessage(OutboundMessage):
    type: Literal["VERSION_ERROR"] = "VERSION_ERROR"
    error: str


class SelectionInfoMessage(OutboundMessage):
    type: Literal["SELECTION_INFO"] = "SELECTION_INFO"
    nodes: list[CanvasNode] = Field(default_factory=list)


class SelectionChangedMessage(OutboundMessage):
    type: Literal["SELECTION_CHANGED"] = "SELECTION_CHANGED"
    count: int
    names: list[str] = Field(default_factory=list)
