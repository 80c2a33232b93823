"""Canvas host capability surface.

Production binds this to the design tool's plugin runtime; tests bind it to an
in-memory fake. Everything flowdoc does on the canvas side goes through here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from flowdoc.models.canvas import CanvasNode, ExportSettings

SelectionListener = Callable[[list[CanvasNode]], None]


class CanvasHost(ABC):
    @abstractmethod
    def get_selection(self) -> list[CanvasNode]:
        """Current page selection, in host order."""

    @abstractmethod
    async def export_node(self, node: CanvasNode, settings: ExportSettings) -> bytes:
        """Rasterize a single node."""

    @abstractmethod
    async def export_page(self, settings: ExportSettings) -> bytes:
        """Rasterize the whole current page."""

    @abstractmethod
    async def save_version(self, label: str, description: str) -> None:
        """Record a named checkpoint in the host's version history."""

    @abstractmethod
    def notify(self, text: str, timeout_ms: int) -> None:
        """Show a transient confirmation to the user."""

    @abstractmethod
    def on_selection_change(self, listener: SelectionListener) -> None:
        """Call ``listener`` with the new selection whenever it changes."""

    @abstractmethod
    def post_message(self, message: dict[str, Any]) -> None:
        """Deliver a message to the UI side of the session."""

    @abstractmethod
    def close(self) -> None:
        """Terminate the plugin session."""
