"""Engine layer: the hunt tick loop."""

from spothunt.engine.hunt_loop import HuntLoop

__all__ = ["HuntLoop"]
