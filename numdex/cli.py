"""CLI interface for Numdex - regenerate the numbered folders index from the terminal."""

import argparse
import locale
import logging
import sys

from numdex.commands import CommandRegistry
from numdex.config import get_settings
from numdex.plugin import REGENERATE_COMMAND_ID, NumberedFoldersPlugin


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for CLI."""
    logging.basicConfig(
        format="%(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
    )


def setup_locale() -> None:
    """Use the user's locale for the footer timestamp (%c)."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logging.getLogger(__name__).warning(f"Falling back to the C locale: {e}")


def print_commands(commands: CommandRegistry) -> None:
    print(f"{Colors.BOLD}Commands:{Colors.RESET}")
    for command in commands.list():
        print(f"  {command.id:<40} {Colors.DIM}{command.name}{Colors.RESET}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numdex-cli",
        description="Maintain an index note of the numbered folders in your vault.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=REGENERATE_COMMAND_ID,
        help=f"Command to run (default: {REGENERATE_COMMAND_ID})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the regenerated index instead of writing it",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available commands and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def cli(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.dry_run and args.command != REGENERATE_COMMAND_ID:
        parser.error(f"--dry-run only previews {REGENERATE_COMMAND_ID}")

    setup_logging(args.verbose)
    setup_locale()
    logger = logging.getLogger(__name__)

    # Load settings
    try:
        settings = get_settings()
        logger.info(f"{Colors.DIM}Vault: {settings.vault_path}{Colors.RESET}")
    except Exception as e:
        logger.error(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        logger.error(
            f"{Colors.RED}Make sure you have a .env file with VAULT_PATH.{Colors.RESET}"
        )
        return 1

    plugin = NumberedFoldersPlugin.from_settings(settings)

    plugin.register_commands()

    if args.list:
        print_commands(plugin.commands)
        return 0

    if args.dry_run:
        try:
            print(plugin.generate_index_content(), end="")
        except OSError as e:
            logger.error(f"{Colors.RED}Failed to read vault: {e}{Colors.RESET}")
            return 1
        return 0

    result = plugin.commands.execute(args.command)
    if not result.success:
        logger.error(f"{Colors.RED}{result.message}{Colors.RESET}")
        return 1

    if result.data is False:
        print(f"{Colors.YELLOW}Index was not updated, see the log above.{Colors.RESET}")
        return 1

    print(f"{Colors.GREEN}{result.message} ✓{Colors.RESET}")
    return 0


if __name__ == "__main__":
    sys.exit(cli())
