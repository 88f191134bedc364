"""HuntManager — owns the live hunt behind the API.

All access goes through a lock: route handlers may run on several
threads, while the hunt itself is only ever advanced by ``step``.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from spothunt.core.enums import HuntOutcome
from spothunt.engine.hunt_loop import HuntLoop
from spothunt.systems.generator import HuntGenerator
from spothunt.systems.rng import DeterministicRNG
from spothunt.utils.event_log import EventLog

if TYPE_CHECKING:
    from spothunt.config import HuntConfig
    from spothunt.core.hunt_state import HuntState

logger = logging.getLogger(__name__)


class HuntManager:
    """Builds, steps and resets one hunt."""

    def __init__(self, config: HuntConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._event_log = EventLog()
        self._loop: HuntLoop | None = None
        self._build()

    def _build(self) -> None:
        rng = DeterministicRNG(self.config.world_seed)
        state = HuntGenerator(self.config, rng).build()
        self._event_log.clear()
        self._loop = HuntLoop(self.config, state, events=self._event_log)

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def loop(self) -> HuntLoop:
        assert self._loop is not None
        return self._loop

    @property
    def lock(self) -> threading.Lock:
        return self._lock

    def get_state(self) -> HuntState:
        return self.loop.state

    def step(self, ticks: int = 1) -> tuple[int, int, HuntOutcome]:
        """Advance up to *ticks* ticks.

        Returns ``(ticks_run, tick, outcome)``, the last two read before the
        lock is released.
        """
        ran = 0
        with self._lock:
            state = self.loop.state
            for _ in range(ticks):
                before = state.tick
                self.loop.tick_once()
                if state.tick == before:
                    break
                ran += 1
            tick, outcome = state.tick, state.outcome
        logger.debug("Stepped %d tick(s), now at tick %d", ran, tick)
        return ran, tick, outcome

    def reset(self) -> int:
        """Rebuild the hunt from the seed; returns the new tick."""
        with self._lock:
            self._build()
            tick = self.loop.state.tick
        logger.info("Hunt reset (seed=%d)", self.config.world_seed)
        return tick
