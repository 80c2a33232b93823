"""Selection → raster export artifact."""

from __future__ import annotations

import base64
import logging

from flowdoc.canvas.host import CanvasHost
from flowdoc.models.canvas import ExportArtifact, ExportError, ExportSettings

logger = logging.getLogger(__name__)

NO_SELECTION_ERROR = "No nodes selected. Select a frame or flow to analyse."

# 2× for legibility by the reasoning service
EXPORT_SETTINGS = ExportSettings(format="PNG", scale=2.0)


class ExportCoordinator:
    def __init__(self, host: CanvasHost) -> None:
        self._host = host

    async def export(self) -> ExportArtifact | ExportError:
        """Export the current selection.

        One node exports that node; several fall back to the whole page (no
        bounding-box union). Host failures come back as ExportError.
        """
        selection = self._host.get_selection()
        if not selection:
            return ExportError(error=NO_SELECTION_ERROR)

        try:
            if len(selection) == 1:
                data = await self._host.export_node(selection[0], EXPORT_SETTINGS)
            else:
                data = await self._host.export_page(EXPORT_SETTINGS)
        except Exception as e:
            logger.warning("Canvas export failed: %s", e)
            return ExportError(error=str(e))

        logger.info("Exported %d node(s), %d bytes", len(selection), len(data))
        return ExportArtifact(
            base64=base64.b64encode(data).decode("ascii"),
            node_count=len(selection),
        )
