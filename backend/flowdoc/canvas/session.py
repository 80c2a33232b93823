"""Plugin message loop — routes UI messages to the canvas coordinators."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, Mapping
from typing import Any

from flowdoc.canvas.export import ExportCoordinator
from flowdoc.canvas.host import CanvasHost
from flowdoc.canvas.versions import VersionCoordinator
from flowdoc.models.canvas import CanvasNode, ExportError, VersionError
from flowdoc.models.messages import (
    ExportErrorMessage,
    ExportSuccessMessage,
    InboundType,
    OutboundMessage,
    SelectionChangedMessage,
    SelectionInfoMessage,
    VersionErrorMessage,
    VersionSavedMessage,
)

logger = logging.getLogger(__name__)


class PluginSession:
    def __init__(
        self,
        host: CanvasHost,
        exporter: ExportCoordinator | None = None,
        versions: VersionCoordinator | None = None,
    ) -> None:
        self._host = host
        self._exporter = exporter or ExportCoordinator(host)
        self._versions = versions or VersionCoordinator(host)
        self.closed = False

    def attach(self) -> None:
        """Start forwarding host selection changes to the UI."""
        self._host.on_selection_change(self._selection_changed)

    def _post(self, message: OutboundMessage) -> None:
        self._host.post_message(message.to_message())

    def _selection_changed(self, selection: list[CanvasNode]) -> None:
        self._post(SelectionChangedMessage(count=len(selection), names=[n.name for n in selection]))

    async def handle_message(self, msg: Mapping[str, Any]) -> None:
        """Process one inbound message to completion."""
        raw_type = msg.get("type")
        try:
            msg_type = InboundType(raw_type)
        except ValueError:
            logger.warning("Unknown message type: %r", raw_type)
            return

        if msg_type is InboundType.EXPORT_SELECTION:
            await self._export_selection()
        elif msg_type is InboundType.SAVE_VERSION:
            payload = msg.get("payload")
            await self._save_version(payload if isinstance(payload, str) else None)
        elif msg_type is InboundType.GET_SELECTION_INFO:
            self._post(SelectionInfoMessage(nodes=self._host.get_selection()))
        elif msg_type is InboundType.CLOSE:
            self.closed = True
            self._host.close()

    async def _export_selection(self) -> None:
        outcome = await self._exporter.export()
        if isinstance(outcome, ExportError):
            self._post(ExportErrorMessage(error=outcome.error))
        else:
            self._post(ExportSuccessMessage(base64=outcome.base64, node_count=outcome.node_count))

    async def _save_version(self, label: str | None) -> None:
        outcome = await self._versions.save_checkpoint(label)
        if isinstance(outcome, VersionError):
            self._post(VersionErrorMessage(error=outcome.error))
        else:
            self._post(VersionSavedMessage(label=outcome.label))

    async def serve(self, messages: AsyncIterable[Mapping[str, Any]]) -> None:
        """Handle messages strictly one at a time until CLOSE or the stream ends."""
        async for msg in messages:
            await self.handle_message(msg)
            if self.closed:
                break
