"""Entry point: ``python -m spothunt``.

Supports two modes:
  - ``python -m spothunt``            → Launch the FastAPI server
  - ``python -m spothunt cli``        → Headless hunt writing a replay file
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Spot Hunt target selection")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a headless hunt")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--ticks", type=int, default=200)
    cli.add_argument("--width", type=int, default=16)
    cli.add_argument("--height", type=int, default=16)
    cli.add_argument("--players", type=int, default=3)
    cli.add_argument("--goals", type=int, default=5)
    cli.add_argument("--replay", type=str, default="replay.json")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from spothunt.api.app import create_app
    from spothunt.config import HuntConfig

    config = HuntConfig(world_seed=args.seed, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from spothunt.config import HuntConfig
    from spothunt.engine.hunt_loop import HuntLoop
    from spothunt.systems.generator import HuntGenerator
    from spothunt.systems.rng import DeterministicRNG
    from spothunt.utils.logging import setup_logging
    from spothunt.utils.replay import ReplayRecorder

    config = HuntConfig(
        world_seed=args.seed,
        max_ticks=args.ticks,
        grid_width=args.width,
        grid_height=args.height,
        num_players=args.players,
        num_goals=args.goals,
        replay_file=args.replay,
        log_level=args.log_level,
    )

    setup_logging(config.log_level)

    rng = DeterministicRNG(config.world_seed)
    state = HuntGenerator(config, rng).build()
    recorder = ReplayRecorder(config.replay_file, config.world_seed)
    outcome = HuntLoop(config, state, recorder=recorder).run()

    logger.info(
        "Done: %s after %d ticks, %d goals reached. Replay written to %s",
        outcome.name, state.tick, state.reached, config.replay_file,
    )


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
