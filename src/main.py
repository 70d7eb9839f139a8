#!/usr/bin/env python3
"""
Card Fusion - Main Entry Point.

Console front end for the card fusion game:

    python main.py validate [--catalog PATH_OR_URL]
    python main.py play [--catalog PATH_OR_URL]
"""

import argparse
import shlex
from typing import List, Optional

from application.services import BoardPresenter, CatalogService, LoggingService, SessionController
from config import config
from domain.errors import LoadError
from domain.models import Catalog, ElementId
from domain.services import GameRules

HELP_TEXT = """Commands:
  select <id>   put a card into the first empty slot
  clear <1|2>   return the card in a slot
  combine       combine the two cards in the slots
  status        show the board
  stats         show session statistics
  help          show this help
  quit          leave the game"""


def parse_element_id(token: str, catalog: Catalog) -> ElementId:
    """Turn a typed token into an element id, preferring an exact string id."""
    if token in catalog:
        return token
    try:
        number = int(token)
    except ValueError:
        return token
    return number if number in catalog else token


def run_command(session: SessionController, presenter: BoardPresenter, line: str) -> Optional[str]:
    """
    Execute one console command.

    Returns:
        Text to show, or None when the player quits
    """
    try:
        parts = shlex.split(line)
    except ValueError as e:
        return f"⚠️ Cannot parse command: {e}"

    if not parts:
        return ""

    command, args = parts[0].lower(), parts[1:]

    if command in ("quit", "exit", "q"):
        return None
    elif command == "help":
        return HELP_TEXT
    elif command == "status":
        return presenter.render()
    elif command == "stats":
        return "\n".join(f"{key}: {value}" for key, value in session.get_session_stats().items())
    elif command == "select" and len(args) == 1:
        session.select_element(parse_element_id(args[0], session.catalog))
        return presenter.render()
    elif command == "clear" and len(args) == 1:
        try:
            slot_index = int(args[0])
        except ValueError:
            return "⚠️ Slot must be 1 or 2"
        session.clear_slot(slot_index)
        return presenter.render()
    elif command == "combine" and not args:
        session.attempt_combine()
        return presenter.render()
    else:
        return f"⚠️ Unknown command: {line.strip()}\n{HELP_TEXT}"


def load_catalog(location: Optional[str], logger: LoggingService) -> Optional[Catalog]:
    """Load the catalog, reporting failures instead of raising."""
    catalog_service = CatalogService(logger)
    try:
        return catalog_service.load_from(
            config.resolve_catalog_location(location), timeout=config.CATALOG_FETCH_TIMEOUT
        )
    except LoadError as e:
        print(f"❌ {e}")
        return None


def run_validate(location: Optional[str]) -> bool:
    """Load a catalog and print its summary."""
    logger = LoggingService(log_level=config.effective_log_level, enable_timing=config.ENABLE_TIMING_LOGS)
    catalog = load_catalog(location, logger)
    if catalog is None:
        return False

    summary = catalog.get_summary()
    print("=" * 60)
    print(f"📚 {summary['topic'] or 'Untitled catalog'}")
    print("=" * 60)
    print(f"🧱 Elements: {summary['elements']}")
    print(f"🌱 Base elements: {summary['base_elements']}")
    print(f"🔬 Discoverable: {summary['discoverable']}")
    print(f"🧪 Recipes: {summary['recipes']}")
    print(f"📶 Tiers: {', '.join(str(tier) for tier in summary['tiers'])}")
    print("=" * 60)
    return True


def run_play(location: Optional[str]) -> bool:
    """Run an interactive console session."""
    logger = LoggingService(log_level=config.effective_log_level, enable_timing=config.ENABLE_TIMING_LOGS)
    catalog = load_catalog(location, logger)
    if catalog is None:
        print(f"❌ {GameRules.LOAD_FAILED_MESSAGE}")
        return False

    session = SessionController.from_config(catalog, logger, config)
    presenter = BoardPresenter(session)

    print(presenter.render())
    print(HELP_TEXT)

    try:
        while True:
            output = run_command(session, presenter, input("> "))
            if output is None:
                break
            if output:
                print(output)
    except (KeyboardInterrupt, EOFError):
        print()

    snapshot = session.snapshot()
    print(f"👋 Leaving with {snapshot.progress_text}")
    return True


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="Card Fusion - combine cards to discover new ones")
    subparsers = parser.add_subparsers(dest="command")

    for name, help_text in (("play", "play an interactive session"), ("validate", "check a catalog file")):
        subparser = subparsers.add_parser(name, help=help_text)
        subparser.add_argument("--catalog", help="catalog path or URL (default: CATALOG_SOURCE)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns a process exit code."""
    args = build_parser().parse_args(argv)

    if args.command == "validate":
        return 0 if run_validate(args.catalog) else 1
    return 0 if run_play(getattr(args, "catalog", None)) else 1


if __name__ == "__main__":
    raise SystemExit(main())
