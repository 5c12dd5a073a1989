"""Main entry point for Numdex."""

import logging
import sys

from numdex.cli import Colors, setup_locale, setup_logging
from numdex.config import get_settings
from numdex.plugin import NumberedFoldersPlugin


def main() -> None:
    """Load the plugin once: write the index and release its listeners."""
    setup_logging()
    setup_locale()
    logger = logging.getLogger(__name__)

    try:
        settings = get_settings()
        logger.info(f"{Colors.DIM}Vault: {settings.vault_path}{Colors.RESET}")
        logger.info(f"{Colors.DIM}Index: {settings.index_file_name}{Colors.RESET}")
    except Exception as e:
        logger.error(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        logger.error(
            f"{Colors.RED}Make sure you have a .env file with required variables.{Colors.RESET}"
        )
        sys.exit(1)

    plugin = NumberedFoldersPlugin.from_settings(settings)
    plugin.on_load()
    plugin.on_unload()

    logger.info(f"{Colors.GREEN}{Colors.BOLD}Numdex done ✓{Colors.RESET}")


if __name__ == "__main__":
    main()
