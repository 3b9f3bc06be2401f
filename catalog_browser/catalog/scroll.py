"""Scroll position restoration.

Reapplies a saved scroll offset to a viewport whose content may still be
reflowing. A single scroll call can land short while the list is being
laid out, so the offset is reapplied across frame boundaries.
"""

import asyncio
from enum import Enum
from typing import Protocol, runtime_checkable

import structlog

from catalog_browser.infrastructure.config import settings

logger = structlog.get_logger()


class ScrollBehavior(str, Enum):
    """Scroll transition mode of the root document element."""

    AUTO = "auto"
    SMOOTH = "smooth"


@runtime_checkable
class Viewport(Protocol):
    """Presentation boundary consumed by the list cache.

    Implemented by whatever renders the product list.
    """

    scroll_behavior: ScrollBehavior

    def get_scroll_offset(self) -> int:
        """Return the current vertical scroll offset in pixels."""
        ...

    def set_scroll_offset(self, offset: int) -> None:
        """Scroll the viewport to ``offset`` pixels from the top."""
        ...

    async def next_frame(self) -> None:
        """Resume on the next rendering frame."""
        ...


@runtime_checkable
class LayoutObserver(Protocol):
    """Optional viewport capability: notify once layout has settled."""

    async def wait_for_layout_stable(self) -> None:
        """Resume once no further reflow is pending."""
        ...


class ScrollRestorer:
    """Drives a viewport back to a saved scroll offset.

    With a viewport that implements LayoutObserver, the offset is applied,
    layout is awaited, and the offset is applied once more. Otherwise a
    fixed-depth heuristic is used: apply now, apply on the next frame,
    apply on the frame after that, then wait ``settle_delay`` seconds.
    This bounds the work but does not guarantee convergence on very slow
    layouts.

    The viewport's scroll behavior is forced to AUTO while restoring so the
    repeated jumps do not animate, and is put back afterwards.
    """

    frame_attempts = 2

    def __init__(self, settle_delay: float | None = None) -> None:
        """Initialize the restorer.

        Args:
            settle_delay: Seconds to wait after the last frame attempt.
        """
        self.settle_delay = (
            settle_delay if settle_delay is not None else settings.scroll_settle_delay
        )

    async def restore(self, viewport: Viewport, offset: int) -> int:
        """Restore ``viewport`` to ``offset``.

        Args:
            viewport: Viewport to scroll.
            offset: Target offset in pixels. Zero or less is a no-op.

        Returns:
            Number of times the offset was applied.
        """
        if offset <= 0:
            return 0

        original_behavior = viewport.scroll_behavior
        viewport.scroll_behavior = ScrollBehavior.AUTO
        attempts = 0

        try:
            viewport.set_scroll_offset(offset)
            attempts += 1

            if isinstance(viewport, LayoutObserver):
                await viewport.wait_for_layout_stable()
                viewport.set_scroll_offset(offset)
                attempts += 1
            else:
                for _ in range(self.frame_attempts):
                    await viewport.next_frame()
                    viewport.set_scroll_offset(offset)
                    attempts += 1
                await asyncio.sleep(self.settle_delay)
        finally:
            viewport.scroll_behavior = original_behavior

        logger.debug(
            "Scroll position restored",
            offset=offset,
            attempts=attempts,
            landed_at=viewport.get_scroll_offset(),
        )
        return attempts
