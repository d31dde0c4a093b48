"""Command-line launcher for the snake session server."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-session",
        description="Server-authoritative snake game over WebSocket.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Run the WebSocket game server.")
    serve_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; flags override its values.",
    )
    serve_p.add_argument("--board-width", type=int, default=None)
    serve_p.add_argument("--board-height", type=int, default=None)
    serve_p.add_argument("--initial-length", type=int, default=None)
    serve_p.add_argument(
        "--tick-ms", type=int, default=None,
        help="Milliseconds between ticks.",
    )
    serve_p.add_argument("--host", type=str, default=None)
    serve_p.add_argument("--port", type=int, default=None)
    serve_p.add_argument(
        "--log-level", type=str, default="info",
        choices=["debug", "info", "warning", "error"],
    )

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write the default config to a JSON file.",
    )
    init_p.add_argument("path", help="Destination path.")

    return parser


def _resolve_config(args: argparse.Namespace):
    from snake_session.config import ServerConfig

    config = ServerConfig.load(args.config) if args.config else ServerConfig()

    overrides: dict = {}
    flag_map = {
        "board_width": "board_width",
        "board_height": "board_height",
        "initial_length": "initial_length",
        "tick_ms": "tick_interval_ms",
        "host": "host",
        "port": "port",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = ServerConfig(**d)
    return config


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from snake_session.server.app import create_app

    logging.getLogger().setLevel(args.log_level.upper())
    try:
        config = _resolve_config(args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    logger.info(
        "Starting snake server on %s:%d (board %dx%d, tick %d ms).",
        config.host, config.port, config.board_width, config.board_height,
        config.tick_interval_ms,
    )
    uvicorn.run(
        create_app(config), host=config.host, port=config.port,
        log_level=args.log_level,
    )
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    from snake_session.config import ServerConfig

    ServerConfig().save(args.path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-session`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "serve": _run_serve,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
