"""Entry point for the reqline CLI."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from reqline import __version__
from reqline.config import LOG_LEVELS, config_to_dict, default_log_path, load_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reqline", description="reqline: terminal request builder"
    )
    parser.add_argument("--config", default=None, help="Path to config.json")
    parser.add_argument("--log-file", default=None, help="Write logs to this file")
    parser.add_argument("--log-level", default=None, choices=list(LOG_LEVELS))
    parser.add_argument(
        "--dump-config", action="store_true", help="Print the effective config and exit"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.log_level:
        config.log_level = args.log_level
    if args.log_file:
        config.log_file = args.log_file

    if args.dump_config:
        print(json.dumps(config_to_dict(config), indent=2))
        return

    # stdout belongs to the UI, so logs always go to a file
    log_path = Path(config.log_file) if config.log_file else default_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=str(log_path),
    )

    from reqline.app import App
    from reqline.terminal import ProcessTerminal

    App(ProcessTerminal(kitty_keyboard=config.kitty_keyboard), config).run()


if __name__ == "__main__":
    main()
