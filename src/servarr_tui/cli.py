"""CLI entry point for servarr-tui."""

from __future__ import annotations

import argparse
import json
import logging

import servarr_tui.io.logging_setup
from servarr_tui.settings import Config, get_config_path, load_config, save_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="servarr-tui",
        description="Terminal UI for managing Radarr and Sonarr servers",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Config file path (default: $SERVARR_TUI_CONFIG or $XDG_CONFIG_HOME/servarr-tui/config.json)",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a default config file if none exists, then exit",
    )
    return parser


def init_config(override: str | None) -> int:
    path = get_config_path(override)
    if path.exists():
        print(f"Config already exists: {path}")
        return 1
    save_settings(path, Config.from_dict({}).to_dict())
    print(f"Wrote default config: {path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.init_config:
        return init_config(args.config)

    config = load_config(args.config)
    if args.print_config:
        print(json.dumps(config.to_dict(), indent=2))
        return 0

    # [LAW:single-enforcer] Logger wiring is centralized in io.logging_setup.
    runtime = servarr_tui.io.logging_setup.configure()
    logger.info(
        "config %s, log level %s, log file %s",
        get_config_path(args.config),
        runtime.level_name,
        runtime.file_path,
    )

    # Imported late so --print-config works without a terminal.
    from servarr_tui.tui.app import ServarrTuiApp

    ServarrTuiApp(config).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
