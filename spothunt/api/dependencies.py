"""FastAPI dependency injection — provides the HuntManager singleton."""

from __future__ import annotations

from spothunt.api.hunt_manager import HuntManager

_hunt_manager: HuntManager | None = None


def set_hunt_manager(manager: HuntManager | None) -> None:
    global _hunt_manager
    _hunt_manager = manager


def get_hunt_manager() -> HuntManager:
    if _hunt_manager is None:
        raise RuntimeError("HuntManager not initialized — server not started correctly.")
    return _hunt_manager
