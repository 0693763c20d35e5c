"""Command-line interface for DANGLESCAN."""

import argparse
import sys
import logging
from typing import List, Optional

from danglescan import __version__
from danglescan.core.exceptions import ValidationError, ConfigurationError
from danglescan.core.interfaces import ProbeResult
from danglescan.utils.error_handler import ErrorHandler


class CLI:
    """Command-line interface for DANGLESCAN."""

    def __init__(self):
        """Initialize the CLI."""
        self.parser = self._create_parser()
        self.logger = logging.getLogger('danglescan.cli')

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser with all options.

        Returns:
            Configured argument parser
        """
        parser = argparse.ArgumentParser(
            prog='danglescan',
            description='DANGLESCAN - check subdomains for takeover via dangling DNS records',
            epilog='Example: danglescan shop.example.com assets.example.com --output json'
        )

        parser.add_argument(
            'hostnames',
            nargs='*',
            help='Subdomains to check (with or without http:// or https://)'
        )

        parser.add_argument(
            '-i', '--input-file',
            help='Read subdomains from a file, one per line'
        )

        # Output options
        parser.add_argument(
            '--output',
            choices=['text', 'json', 'csv'],
            default='text',
            help='Output format (default: text)'
        )

        parser.add_argument(
            '--output-file',
            help='Write output to file instead of stdout'
        )

        # Network options
        parser.add_argument(
            '--timeout',
            type=float,
            default=None,
            help='HTTP timeout in seconds (default: wait indefinitely)'
        )

        parser.add_argument(
            '--dns-timeout',
            type=float,
            default=5.0,
            help='DNS lookup timeout in seconds (default: 5)'
        )

        parser.add_argument(
            '--user-agent',
            help='User-Agent header to send (default: danglescan/1.0)'
        )

        # Verbosity options
        parser.add_argument(
            '-v', '--verbose',
            action='store_true',
            help='Enable verbose output'
        )

        parser.add_argument(
            '-q', '--quiet',
            action='store_true',
            help='Suppress all non-error output'
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'%(prog)s {__version__}'
        )

        return parser

    def parse_arguments(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments.

        Args:
            args: Command-line arguments (None for sys.argv)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def load_hostnames(self, args: argparse.Namespace) -> List[str]:
        """Collect hostnames from the positional arguments and the input file.

        Blank lines and lines starting with '#' in the input file are skipped.

        Args:
            args: Parsed arguments namespace

        Returns:
            Hostnames in the order given

        Raises:
            ValidationError: If the input file cannot be read
        """
        hostnames = list(args.hostnames)

        if args.input_file:
            try:
                with open(args.input_file, 'r') as f:
                    for line in f:
                        line = line.strip()
                        if line and not line.startswith('#'):
                            hostnames.append(line)
            except OSError as e:
                raise ValidationError(f"Cannot read input file {args.input_file}: {e}") from e

        return hostnames

    def validate_input(self, args: argparse.Namespace, hostnames: List[str]) -> bool:
        """Validate user input.

        Args:
            args: Parsed arguments namespace
            hostnames: Hostnames collected from the arguments

        Returns:
            True if input is valid

        Raises:
            ValidationError: If input is invalid
        """
        if not hostnames:
            raise ValidationError("No subdomains given; pass hostnames or --input-file")

        if args.verbose and args.quiet:
            raise ValidationError("Cannot specify both --verbose and --quiet")

        if args.timeout is not None and args.timeout <= 0:
            raise ValidationError("Timeout must be positive")

        if args.dns_timeout <= 0:
            raise ValidationError("DNS timeout must be positive")

        return True

    def display_results(self, results: List[ProbeResult], output_format: str,
                        output_file: Optional[str] = None) -> None:
        """Display results in the specified format.

        Args:
            results: Probe results
            output_format: Output format (text, json, csv)
            output_file: Optional output file path
        """
        from danglescan.utils.formatters import write_output
        write_output(results, output_format, output_file)

    def display_summary(self, results: List[ProbeResult]) -> None:
        """Display summary of results.

        Args:
            results: Probe results
        """
        print("\nSummary:", file=sys.stderr)
        print(f"Total subdomains checked: {len(results)}", file=sys.stderr)
        print(f"Vulnerable: {sum(1 for r in results if r.vulnerable)}", file=sys.stderr)
        print(f"With errors: {sum(1 for r in results if r.error_message)}", file=sys.stderr)

        for result in results:
            if result.vulnerable:
                print(f"  {result.subdomain}: {result.service}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = CLI()
    args = cli.parse_arguments(argv)

    error_handler = ErrorHandler(verbose=args.verbose)

    try:
        hostnames = cli.load_hostnames(args)
        cli.validate_input(args, hostnames)
    except ValidationError as e:
        error_handler.handle_error('input', str(e))
        return 1

    try:
        from danglescan.core.coordinator import ProbeCoordinator

        coordinator = ProbeCoordinator(
            timeout=args.timeout,
            dns_timeout=args.dns_timeout,
            user_agent=args.user_agent,
            show_progress=args.verbose
        )

        results = coordinator.check_subdomains(hostnames)

        cli.display_results(results, args.output, args.output_file)

        if not args.quiet:
            cli.display_summary(results)

        return 0
    except ConfigurationError as e:
        error_handler.handle_error('input', str(e))
        return 1
    except Exception as e:
        error_handler.handle_error('unexpected', "An unexpected error occurred", e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
