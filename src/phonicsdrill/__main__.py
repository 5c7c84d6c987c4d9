"""Main entry point for the drill."""
import argparse
import logging
import sys

from phonicsdrill.app import PhonicsDrill
from phonicsdrill.cli import run_cli
from phonicsdrill.config import ensure_directories
from phonicsdrill.exceptions import CatalogLoadError
from phonicsdrill.logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="phonicsdrill", description="Phonics flashcard drill")
    parser.add_argument("--catalog", help="Path to the words JSON file")
    parser.add_argument("--level", help="Start a session for this level (needs --week)")
    parser.add_argument("--week", help="Start a session for this week (needs --level)")
    parser.add_argument("--practice", action="store_true", help="Start a practice test over every word")
    parser.add_argument("--icon-dir", help="Write alien art for alien words as SVG files into this directory")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    args = parser.parse_args(argv)
    if (args.level is None) != (args.week is None):
        parser.error("--level and --week must be given together")
    return args


def main(argv=None) -> int:
    """Run the drill."""
    args = parse_args(argv)

    # Ensure all required directories exist
    ensure_directories()

    setup_logging("Starting phonics drill ...", args.log_level)

    app = PhonicsDrill(catalog_path=args.catalog)
    try:
        app.start()
    except CatalogLoadError as e:
        logger.error(f"Cannot continue without a word catalog: {e}")
        return 1

    try:
        run_cli(app, level=args.level, week=args.week, practice=args.practice, icon_dir=args.icon_dir)
    except (KeyboardInterrupt, EOFError):
        logger.info("Received keyboard interrupt, shutting down...")
    finally:
        app.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
