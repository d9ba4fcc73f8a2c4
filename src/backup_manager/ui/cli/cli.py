"""Command line interface for backup-manager."""

import sys
from typing import final

from backup_manager.features.storage import BackupManagerError
from backup_manager.platform.logging import logger
from backup_manager.ui.cli.args import ArgumentParser
from backup_manager.ui.cli.args.options import CLIArgs
from backup_manager.ui.cli.commands import ListStorageContentsCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if not ListStorageContentsCommand(args).execute():
                sys.exit(1)
            return

        except (KeyboardInterrupt, EOFError):
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except BackupManagerError as e:
            logger.error("%s", e, extra={"markup": False})
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e), extra={"markup": False})
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures leave through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
