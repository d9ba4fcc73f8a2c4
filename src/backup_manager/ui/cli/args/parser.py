"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from backup_manager.config.config import Config
from backup_manager.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from backup_manager.ui.cli.args.options import CLIArgs, ListStorageContentsArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="backup-manager",
            description="backup-manager - Inspect configured backup storage destinations.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        list_parser = subparsers.add_parser(
            "list-storage-contents",
            help="List contents of a backup storage destination",
        )
        _ = list_parser.add_argument(
            "--source",
            type=str,
            help="Source configuration name (asked interactively when omitted)",
            metavar="NAME",
        )
        _ = list_parser.add_argument(
            "--path",
            type=str,
            help="Directory path to list (asked interactively when omitted, default /)",
            metavar="PATH",
        )
        _ = list_parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed listing information",
        )
        _ = list_parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress log output except errors",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            ConfigurationError: If the configuration file cannot be read.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "list-storage-contents":
            return ListStorageContentsArgs(
                command="list-storage-contents",
                source=parsed_args.source,
                path=parsed_args.path,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
