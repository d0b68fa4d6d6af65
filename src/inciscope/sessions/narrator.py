# src/inciscope/sessions/narrator.py
"""Timed progress messages shown while a validation call is pending.

The narrator is cosmetic: its phases follow fixed offsets from the moment a
request starts and know nothing about real backend progress.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from functools import partial
from typing import Protocol

from inciscope.sessions.base import Observable
from inciscope.settings import DEFAULT_NARRATOR_PHASES, NarratorPhase


class Cancellable(Protocol):
    """Handle for a scheduled callback."""

    def cancel(self) -> None: ...


# Schedules ``callback`` to run after ``delay`` seconds
Scheduler = Callable[[float, Callable[[], None]], Cancellable]


def asyncio_scheduler(delay: float, callback: Callable[[], None]) -> Cancellable:
    """Schedule on the running event loop."""
    return asyncio.get_running_loop().call_later(delay, callback)


class ProgressNarrator(Observable):
    """Cancelable, ordered list of timed status phases.

    Example:
        narrator = ProgressNarrator()
        narrator.start()   # phase 1 visible now, later phases on their timers
        narrator.stop()    # pending timers cancelled, everything hidden
    """

    def __init__(
        self,
        phases: Sequence[NarratorPhase] | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        super().__init__()
        source = DEFAULT_NARRATOR_PHASES if phases is None else phases
        self._phases = sorted(source, key=lambda phase: phase.offset)
        self._schedule = scheduler or asyncio_scheduler
        self._pending: list[Cancellable] = []
        self._visible: set[int] = set()
        self._generation = 0
        self._active = False

    @property
    def phases(self) -> list[NarratorPhase]:
        return list(self._phases)

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def visible_messages(self) -> list[str]:
        """Messages of the phases shown so far, in phase order."""
        return [self._phases[i].message for i in sorted(self._visible)]

    @property
    def current_message(self) -> str | None:
        visible = self.visible_messages
        return visible[-1] if visible else None

    def start(self) -> None:
        """Reset and begin a new run.

        Any run in progress is discarded first, so no phase of an earlier run
        can appear later.
        """
        self._cancel_pending()
        self._generation += 1
        self._visible.clear()
        self._active = True

        generation = self._generation
        for index, phase in enumerate(self._phases):
            if phase.offset <= 0:
                self._visible.add(index)
            else:
                handle = self._schedule(phase.offset, partial(self._activate, generation, index))
                self._pending.append(handle)
        self._notify()

    def stop(self) -> None:
        """Tear down the current run immediately, whatever phase it reached."""
        was_shown = self._active or bool(self._visible)
        self._cancel_pending()
        self._generation += 1
        self._visible.clear()
        self._active = False
        if was_shown:
            self._notify()

    def _activate(self, generation: int, index: int) -> None:
        # Timers from an earlier run are ignored even if cancellation raced them
        if generation != self._generation or not self._active:
            return
        self._visible.add(index)
        self._notify()

    def _cancel_pending(self) -> None:
        for handle in self._pending:
            handle.cancel()
        self._pending.clear()
