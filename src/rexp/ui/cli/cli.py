"""Command line interface for rexp."""

import sys
from typing import final

from rich.console import Console

from rexp.platform.logging import logger
from rexp.shared import RexpError
from rexp.ui.cli.args import ArgumentParser, InfoArgs
from rexp.ui.cli.commands import ListingCommand
from rexp.ui.cli.display import render_listing


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: list[str] | None = None,
        console: Console | None = None,
    ) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            console: Console to print to (for testing).
        """
        try:
            args: InfoArgs = ArgumentParser.process_args(args_list)
            listing = ListingCommand(args).execute()
            render_listing(console or Console(), listing)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except (RexpError, OSError) as e:
            logger.error("%s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through ``sys.exit``.
    """
    CommandProcessor.process_command()
    return 0


if __name__ == "__main__":
    sys.exit(main())
