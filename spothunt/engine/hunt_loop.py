"""HuntLoop — the authoritative tick engine of a hunt.

Tick cycle:
  1. Sensing  — refresh the danger field and measure every goal spot
  2. Deciding — the mover ranks the goals and picks a target
  3. Moving   — the mover steps along the fastest path, then every
                player steps toward the mover
  4. Judging  — record reached goals and captures, advance the tick
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from spothunt.core.enums import HuntOutcome
from spothunt.utils.event_log import EventLog, HuntEvent

if TYPE_CHECKING:
    from spothunt.ai.ranker import RankingResult
    from spothunt.config import HuntConfig
    from spothunt.core.hunt_state import HuntState
    from spothunt.utils.replay import ReplayRecorder

logger = logging.getLogger(__name__)


class HuntLoop:
    """Single-threaded mutation of HuntState, one tick at a time."""

    __slots__ = ("_config", "_state", "_recorder", "_events", "_last_decision")

    def __init__(
        self,
        config: HuntConfig,
        state: HuntState,
        recorder: ReplayRecorder | None = None,
        events: EventLog | None = None,
    ) -> None:
        self._config = config
        self._state = state
        self._recorder = recorder
        self._events = events or EventLog()
        self._last_decision: RankingResult | None = None

    @property
    def state(self) -> HuntState:
        return self._state

    @property
    def events(self) -> EventLog:
        return self._events

    @property
    def last_decision(self) -> RankingResult | None:
        """Ranking made during the most recent tick."""
        return self._last_decision

    def _emit(self, category: str, message: str) -> None:
        self._events.append(HuntEvent(tick=self._state.tick, category=category, message=message))

    def tick_once(self) -> bool:
        """Execute a single tick. Returns False if the hunt should stop."""
        state = self._state
        if state.outcome != HuntOutcome.RUNNING:
            return False

        if state.tick >= self._config.max_ticks:
            state.outcome = HuntOutcome.TIMED_OUT
            logger.info("Tick %d: Max ticks reached — mover escaped.", state.tick)
            self._emit("timeout", "Max ticks reached")
            return False

        self._step()
        state.tick += 1
        return state.outcome == HuntOutcome.RUNNING

    def run(self) -> HuntOutcome:
        """Execute the hunt until capture or max_ticks."""
        logger.info("=== Hunt started (seed=%d) ===", self._state.seed)
        while self.tick_once():
            if self._state.tick % 50 == 0:
                logger.info("Tick %d: mover at %s", self._state.tick, self._state.mover.pos)
        logger.info(
            "=== Hunt finished at tick %d (%s) ===",
            self._state.tick, self._state.outcome.name,
        )
        if self._recorder:
            self._recorder.flush()
        return self._state.outcome

    def _step(self) -> None:
        state = self._state
        cfg = self._config
        mover = state.mover

        # 1. Sensing
        state.playfield.refresh_danger(state.players, cfg.player_danger, cfg.danger_radius)
        goals = state.measure_goals()

        # 2. Deciding
        decision = mover.decide(goals, state.tick)
        self._last_decision = decision
        if state.target != decision.goal.pos:
            self._emit("target", f"Mover targets {decision.goal.pos} ({decision.stage})")
        state.target = decision.goal.pos
        if self._recorder:
            self._recorder.record_tick(state, decision)

        # 3. Moving
        step = state.oracle.pathfinder.next_step(mover.pos, decision.goal.pos)
        if step is not None:
            mover.set_location(step.x, step.y)
            if mover.pos == decision.goal.pos:
                state.reached += 1
                logger.info("Tick %d: Mover reached goal %s", state.tick, mover.pos)
                self._emit("reached", f"Mover reached {mover.pos}")

        if not state.is_caught():
            for player in state.players:
                state.move_player(player, player.step_toward(mover.pos))

        # 4. Judging
        if state.is_caught():
            state.outcome = HuntOutcome.CAUGHT
            logger.info("Tick %d: Mover caught at %s", state.tick, mover.pos)
            self._emit("caught", f"Mover caught at {mover.pos}")
