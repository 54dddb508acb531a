"""CLI interface for vaultsite - publish your vault from the terminal."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from vaultsite.config import ConfigManager, Settings, get_settings
from vaultsite.publish import route_for, strip_md_suffix
from vaultsite.sync import SyncEngine

logger = logging.getLogger(__name__)


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    CYAN = "\033[36m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for CLI."""
    logging.basicConfig(
        format="%(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
    )


def load_settings(vault: Path | None) -> Settings:
    """Settings from the environment, with ``--vault`` taking precedence."""
    if vault is not None:
        return Settings(vault_path=vault)
    return get_settings()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vaultsite",
        description="Publish notes from an Obsidian vault into a static site's content directory.",
    )
    parser.add_argument(
        "--vault",
        type=Path,
        help="Path to the vault (defaults to VAULT_PATH from the environment or .env)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Publish config file relative to the vault root (default: publish.config.json)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be written without touching the site directory",
    )
    parser.add_argument(
        "--list-selected",
        action="store_true",
        help="Print the notes that would be published and exit",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a default publish config if none exists and exit",
    )
    parser.add_argument(
        "--no-assets",
        action="store_true",
        help="Skip copying embedded images into the assets directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every include/exclude decision and link rewrite",
    )
    return parser


def cli(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)

    # Load settings
    try:
        settings = load_settings(args.vault)
    except (ValidationError, ValueError) as e:
        logger.error(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        logger.error(f"{Colors.RED}Pass --vault or set VAULT_PATH in your environment or .env.{Colors.RESET}")
        return 1

    logger.info(f"{Colors.DIM}Vault: {settings.vault_path}{Colors.RESET}")

    manager = ConfigManager(
        settings.vault_path,
        config_file=args.config or settings.config_file,
        obsidian_dir=settings.obsidian_dir,
    )

    if args.init_config:
        if manager.ensure_exists():
            print(f"{Colors.GREEN}Created {manager.config_path}{Colors.RESET}")
        else:
            print(f"{Colors.DIM}{manager.config_path} already exists{Colors.RESET}")
        return 0

    config = manager.load()
    engine = SyncEngine(settings.vault_path, config, dry_run=args.dry_run)

    if args.list_selected:
        selected = engine.selected_notes()
        for path in selected:
            print(f"{path} {Colors.DIM}-> {route_for(strip_md_suffix(path), config)}{Colors.RESET}")
        print(f"{Colors.DIM}{len(selected)} notes selected{Colors.RESET}")
        return 0

    try:
        result = engine.sync()
        if not args.no_assets and result.synced:
            result.assets = engine.copy_assets()
    except (OSError, ValueError) as e:
        logger.error(f"{Colors.RED}Sync failed: {e}{Colors.RESET}")
        return 1

    if not result.synced:
        return 1

    print(f"{Colors.GREEN}✓ Synced {result.synced} notes to {config.content_dir}{Colors.RESET}")
    if result.unresolved or result.ambiguous:
        print(
            f"{Colors.YELLOW}{result.unresolved} unresolved and {result.ambiguous} "
            f"ambiguous links (see warnings above){Colors.RESET}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(cli())
