"""Named version checkpoints in the host's history."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from flowdoc.canvas.host import CanvasHost
from flowdoc.models.canvas import VersionCheckpoint, VersionError

logger = logging.getLogger(__name__)

CHECKPOINT_LABEL_PREFIX = "FlowDoc AI — "
CHECKPOINT_DESCRIPTION = "Auto-saved by FlowDoc AI on documentation generation."
NOTIFY_TIMEOUT_MS = 3000


def default_label(now: datetime) -> str:
    # %c: the locale's date and time representation
    return f"{CHECKPOINT_LABEL_PREFIX}{now.strftime('%c')}"


class VersionCoordinator:
    def __init__(self, host: CanvasHost, clock: Callable[[], datetime] = datetime.now) -> None:
        self._host = host
        self._clock = clock

    async def save_checkpoint(self, label: str | None = None) -> VersionCheckpoint | VersionError:
        """Create exactly one checkpoint. No dedup against earlier ones, no rollback."""
        if not label:
            label = default_label(self._clock())

        try:
            await self._host.save_version(label, CHECKPOINT_DESCRIPTION)
        except Exception as e:
            logger.warning("Version save failed: %s", e)
            return VersionError(error=str(e))

        logger.info("Version saved: %s", label)
        self._host.notify(f'✓ Version saved: "{label}"', NOTIFY_TIMEOUT_MS)
        return VersionCheckpoint(label=label, description=CHECKPOINT_DESCRIPTION)
