"""Command line interface for headr."""

import os
import sys
from typing import final

from headr.features.prefix import SourceReadError
from headr.platform.logging import logger
from headr.ui.cli.args import ArgumentParser
from headr.ui.cli.commands import HeadCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Sources that cannot be opened are reported but never change the
        exit status; a failed read on an opened source exits with 1.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            _ = HeadCommand(args).execute()
        except SourceReadError as e:
            logger.error("Failed to read %s", str(e))
            sys.exit(1)
        except BrokenPipeError:
            # Downstream reader went away; silence the flush at interpreter exit.
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command()
    return 0
