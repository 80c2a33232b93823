"""Canvas side of the plugin: host interface, export and checkpoint coordinators, message session."""

from flowdoc.canvas.export import ExportCoordinator
from flowdoc.canvas.host import CanvasHost
from flowdoc.canvas.session import PluginSession
from flowdoc.canvas.versions import VersionCoordinator

__all__ = ["CanvasHost", "ExportCoordinator", "PluginSession", "VersionCoordinator"]
