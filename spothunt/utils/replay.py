"""Replay serialization — records every target decision of a hunt."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from spothunt.ai.ranker import RankingResult
    from spothunt.core.hunt_state import HuntState

logger = logging.getLogger(__name__)


class ReplayRecorder:
    """Accumulates tick records and flushes them to a JSON replay file."""

    __slots__ = ("_path", "_ticks", "_seed")

    def __init__(self, path: str | Path, seed: int) -> None:
        self._path = Path(path)
        self._seed = seed
        self._ticks: list[dict[str, Any]] = []

    @property
    def ticks(self) -> list[dict[str, Any]]:
        return self._ticks

    def record_tick(self, state: HuntState, decision: RankingResult) -> None:
        self._ticks.append(
            {
                "tick": state.tick,
                "mover": [state.mover.x, state.mover.y],
                "target": [decision.goal.x, decision.goal.y],
                "stage": decision.stage,
                "ratings": decision.ratings,
                "players": [[p.pos.x, p.pos.y] for p in state.players],
            }
        )

    def flush(self) -> None:
        """Write accumulated data to disk."""
        replay = {
            "version": "1.0",
            "seed": self._seed,
            "total_ticks": len(self._ticks),
            "ticks": self._ticks,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(replay, indent=2), encoding="utf-8")
        logger.info("Replay saved to %s (%d ticks)", self._path, len(self._ticks))
