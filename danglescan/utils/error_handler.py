"""Error handling utilities for DANGLESCAN."""

import logging
import sys
from typing import Optional


class ErrorHandler:
    """Centralized error handling for the command-line entry points."""

    def __init__(self, verbose: bool = False):
        """Initialize the error handler.

        Args:
            verbose: Enable verbose error reporting
        """
        self.verbose = verbose
        self._setup_logging()

    def _setup_logging(self):
        """Set up logging configuration."""
        level = logging.DEBUG if self.verbose else logging.INFO
        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[
                logging.StreamHandler(sys.stderr)
            ]
        )
        self.logger = logging.getLogger('danglescan')
        self.logger.setLevel(level)

    def handle_error(self, error_type: str, message: str, exception: Optional[Exception] = None) -> None:
        """Handle errors based on type.

        Both kinds of error terminate the process with status 1.

        Args:
            error_type: Type of error (input or unexpected)
            message: Error message to display
            exception: Optional exception object
        """
        if error_type == 'input':
            print(f"Input Error: {message}", file=sys.stderr)
            if self.verbose and exception:
                self.logger.debug(f"Exception details: {exception}")
        else:
            print(f"Unexpected Error: {message}", file=sys.stderr)
            if exception:
                self.logger.error(f"Exception: {exception}", exc_info=exception)
        sys.exit(1)

    def log_error(self, message: str, exception: Optional[Exception] = None) -> None:
        """Log error details.

        Args:
            message: Error message to log
            exception: Optional exception object
        """
        if exception:
            self.logger.error(f"{message}: {exception}")
        else:
            self.logger.error(message)
