"""Busy-flag guarded backend calls shared by the screens."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from moodboard.errors import MoodboardError
from moodboard.ui.status import StatusBar

logger = logging.getLogger(__name__)


class RequestMixin:
    """Runs blocking client calls off the event loop and reports the outcome.

    The screen using it declares ``busy = reactive(False)``. While a mutating
    call is in flight ``busy`` is set and every ``.mutating`` control is
    disabled, so only one mutation runs at a time.
    """

    busy: bool

    def set_status(self, message: str, error: bool = False) -> None:
        self.query_one(StatusBar).show(message, error)

    def watch_busy(self, busy: bool) -> None:
        for widget in self.query(".mutating"):
            widget.disabled = busy

    async def fetch(self, label: str, func: Callable[..., Any], *args) -> tuple[bool, Any]:
        """Run a read. Failures go to the status bar; returns (ok, result)."""
        try:
            result = await asyncio.to_thread(func, *args)
        except MoodboardError as e:
            self.set_status(f"{label} failed: {e}", error=True)
            return False, None
        return True, result

    async def mutate(self, label: str, func: Callable[..., Any], *args) -> bool:
        """Run a mutating call under the busy flag. Returns True on success.

        A call made while another is in flight is dropped.
        """
        if self.busy:
            logger.debug("dropping %r, a request is already in flight", label)
            return False
        self.busy = True
        try:
            await asyncio.to_thread(func, *args)
        except MoodboardError as e:
            self.set_status(f"{label} failed: {e}", error=True)
            return False
        finally:
            self.busy = False
        return True
