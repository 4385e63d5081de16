"""
CLI entry point.

Boots the coordinator, optionally switches theme and replays a JSON-lines
event script, then prints the resulting state.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from touchpos import __version__
from touchpos.core.errors import EventError, TouchPosError

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="touchpos",
        description="TouchPOS - touch point-of-sale coordinator",
    )
    parser.add_argument("--version", "-v", action="store_true", help="show version")

    subparsers = parser.add_subparsers(dest="command", help="available commands")

    run_parser = subparsers.add_parser("run", help="start the coordinator and replay events")
    run_parser.add_argument("--config", "-c", help="YAML config path")
    run_parser.add_argument("--theme", "-t", help="theme to load after startup")
    run_parser.add_argument("--events", "-e", help="JSON-lines event script")
    run_parser.add_argument("--show-markup", action="store_true", help="print the mounted markup")

    subparsers.add_parser("themes", help="list theme variants")
    return parser


def read_event_script(path: str | Path) -> List[Dict[str, Any]]:
    """Read one JSON object per non-empty line; '#' starts a comment line."""
    entries = []
    for lineno, line in enumerate(Path(path).read_text(encoding="utf-8").splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        try:
            entries.append(json.loads(stripped))
        except json.JSONDecodeError as e:
            raise EventError(message=f"{path}:{lineno}: invalid JSON ({e.msg})") from e
    return entries


async def run_session(
    config_path: Optional[str] = None,
    theme: Optional[str] = None,
    events_path: Optional[str] = None,
) -> Dict[str, Any]:
    from touchpos.application.coordinator import AppCoordinator
    from touchpos.config import load_config
    from touchpos.core.events import event_from_dict
    from touchpos.utils.logger import setup_logger

    config = load_config(config_path)
    setup_logger(config.logging)

    app = AppCoordinator(config=config)
    startup = await app.init()
    summary: Dict[str, Any] = {"initialized": startup.is_ok(), "errors": []}
    if startup.is_err():
        summary["errors"].append(str(startup.error))
        summary["state"] = app.state.to_dict()
        return summary

    theme = theme or config.app.theme
    if theme:
        loaded = await app.load_theme(theme)
        if loaded.is_err():
            summary["errors"].append(str(loaded.error))

    if events_path:
        for raw in read_event_script(events_path):
            await app.dispatch(event_from_dict(raw))

    summary["state"] = app.state.to_dict()
    summary["cart"] = app.cart_manager.generate_receipt_data()
    summary["title"] = app.container.title
    summary["markup"] = app.container.inner_html
    return summary


def run_cli(args: Optional[list] = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.version:
        print(f"TouchPOS v{__version__}")
        return 0

    if not parsed.command:
        parser.print_help()
        return 0

    if parsed.command == "themes":
        from touchpos.application.registries import default_theme_registry

        for variant, desc in default_theme_registry().all().items():
            print(f"{variant.value}\t{desc.title}")
        return 0

    try:
        summary = asyncio.run(run_session(parsed.config, parsed.theme, parsed.events))
    except TouchPosError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    markup = summary.pop("markup", "")
    print(json.dumps(summary, indent=2, ensure_ascii=False, default=str))
    if parsed.show_markup:
        print(markup)
    return 0 if summary["initialized"] else 1


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
