"""Command line argument parser."""

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from rexp.config.config import Config
from rexp.config.settings import RuntimeSettings
from rexp.features.providers import ProviderColumn
from rexp.features.theme import Flavor
from rexp.platform.logging import logger, setup_logger
from rexp.ui.cli.args.options import InfoArgs


DEFAULT_COLUMNS: tuple[ProviderColumn, ...] = (
    ProviderColumn.SUMMARY,
    ProviderColumn.AUTHOR,
    ProviderColumn.MODIFIED,
)


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
            prog="rexp-info",
            description="List a directory with version-control metadata for every entry.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "path",
            nargs="?",
            default=".",
            help="Directory to list or single file to describe (default: current directory)",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--columns",
            type=str,
            default=",".join(column.value for column in DEFAULT_COLUMNS),
            help="Comma-separated provider columns: "
            + ", ".join(column.value for column in ProviderColumn),
        )
        _ = parser.add_argument(
            "--limit",
            type=int,
            help="Maximum commit summary length before it is cut with '..'",
        )
        _ = parser.add_argument(
            "--timeout",
            type=float,
            help="Seconds to wait for each git or linguist invocation",
        )
        _ = parser.add_argument(
            "--workers",
            type=int,
            help="Number of entries queried in parallel",
        )
        _ = parser.add_argument(
            "--flavor",
            type=str,
            choices=[flavor.value for flavor in Flavor],
            help="Color scheme used for the table",
        )
        _ = parser.add_argument(
            "--no-icons",
            action="store_true",
            help="Do not show Nerd Font icons",
        )
        _ = parser.add_argument(
            "-a",
            "--all",
            action="store_true",
            dest="show_hidden",
            help="Include entries whose names start with a dot",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Configuration file to use instead of the default location",
            metavar="CONFIG_PATH",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show command failures and timing information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors and the table",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> InfoArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            InfoArgs: Processed command line arguments.

        Raises:
            SystemExit: If the path does not exist or an option is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        config_path = Path(parsed_args.config) if parsed_args.config else None
        configuration = Config.load(config_path)
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        columns = ArgumentParser._parse_columns(parser, parsed_args.columns)
        settings = ArgumentParser._apply_overrides(
            parser, RuntimeSettings.from_config(configuration), parsed_args
        )

        path = Path(parsed_args.path)
        if not path.exists():
            logger.error("Path does not exist: %s", path)
            sys.exit(1)

        return InfoArgs(
            path=path,
            columns=columns,
            settings=settings,
            show_hidden=parsed_args.show_hidden,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _parse_columns(
        parser: argparse.ArgumentParser, raw: str
    ) -> tuple[ProviderColumn, ...]:
        columns: list[ProviderColumn] = []
        for token in raw.split(","):
            token = token.strip().lower()
            if not token:
                continue
            try:
                column = ProviderColumn(token)
            except ValueError:
                parser.error(f"unknown column: {token}")
            if column not in columns:
                columns.append(column)
        return tuple(columns)

    @staticmethod
    def _apply_overrides(
        parser: argparse.ArgumentParser,
        settings: RuntimeSettings,
        parsed_args: argparse.Namespace,
    ) -> RuntimeSettings:
        overrides: dict[str, object] = {}
        if parsed_args.limit is not None:
            if parsed_args.limit < 0:
                parser.error("--limit must be >= 0")
            overrides["commit_message_limit"] = parsed_args.limit
        if parsed_args.timeout is not None:
            if parsed_args.timeout <= 0:
                parser.error("--timeout must be > 0")
            overrides["process_timeout_seconds"] = parsed_args.timeout
        if parsed_args.workers is not None:
            if parsed_args.workers < 1:
                parser.error("--workers must be >= 1")
            overrides["max_workers"] = parsed_args.workers
        if parsed_args.flavor is not None:
            overrides["theme_flavor"] = Flavor(parsed_args.flavor)
        if parsed_args.no_icons:
            overrides["nerd_fonts"] = False
        return dataclasses.replace(settings, **overrides) if overrides else settings


__all__ = ["ArgumentParser", "DEFAULT_COLUMNS"]
