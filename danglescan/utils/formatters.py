"""Output formatters for DANGLESCAN."""

import json
import csv
import io
import sys
from typing import List, Optional

from danglescan.core.interfaces import ProbeResult, OutputFormatter


class TextFormatter(OutputFormatter):
    """Format results as plain text."""

    def format(self, results: List[ProbeResult]) -> str:
        """Format the results as plain text.

        Args:
            results: Probe results to format

        Returns:
            Formatted text output
        """
        output = io.StringIO()

        output.write("DANGLESCAN Subdomain Takeover Results\n")
        output.write("=" * 40 + "\n\n")

        for result in results:
            marker = "VULNERABLE" if result.vulnerable else "ok"
            output.write(f"{result.subdomain} [{marker}]\n")

            if result.vulnerable:
                output.write(f"  Service: {result.service}\n")
            if result.cname:
                output.write(f"  CNAME: {result.cname}\n")
            if result.http_status:
                output.write(f"  HTTP: {result.http_status}\n")
            if result.error_message:
                output.write(f"  Error: {result.error_message}\n")

            output.write("\n")

        output.write("Summary\n")
        output.write("-" * 40 + "\n")
        output.write(f"Total subdomains: {len(results)}\n")
        output.write(f"Vulnerable: {sum(1 for r in results if r.vulnerable)}\n")
        output.write(f"With errors: {sum(1 for r in results if r.error_message)}\n")

        return output.getvalue()


class JSONFormatter(OutputFormatter):
    """Format results as JSON."""

    def format(self, results: List[ProbeResult]) -> str:
        """Format the results as JSON.

        Unset optional fields are omitted from each record.

        Args:
            results: Probe results to format

        Returns:
            Formatted JSON output
        """
        output = {
            'results': [result.to_dict() for result in results]
        }
        return json.dumps(output, indent=2)


class CSVFormatter(OutputFormatter):
    """Format results as CSV."""

    def format(self, results: List[ProbeResult]) -> str:
        """Format the results as CSV.

        Args:
            results: Probe results to format

        Returns:
            Formatted CSV output
        """
        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow([
            'Subdomain',
            'Vulnerable',
            'Service',
            'CNAME',
            'HTTP Status',
            'Error'
        ])

        for result in results:
            writer.writerow([
                result.subdomain,
                'yes' if result.vulnerable else 'no',
                result.service or '',
                result.cname or '',
                str(result.http_status) if result.http_status else '',
                result.error_message or ''
            ])

        return output.getvalue()


class FormatterFactory:
    """Factory for creating output formatters."""

    @staticmethod
    def create_formatter(format_type: str) -> OutputFormatter:
        """Create an output formatter based on the format type.

        Args:
            format_type: Type of formatter (text, json, csv)

        Returns:
            OutputFormatter instance

        Raises:
            ValueError: If format type is invalid
        """
        if format_type == 'text':
            return TextFormatter()
        elif format_type == 'json':
            return JSONFormatter()
        elif format_type == 'csv':
            return CSVFormatter()
        else:
            raise ValueError(f"Invalid format type: {format_type}")


def write_output(results: List[ProbeResult], format_type: str,
                 output_file: Optional[str] = None) -> None:
    """Write formatted output to file or stdout.

    Args:
        results: Probe results
        format_type: Output format (text, json, csv)
        output_file: Optional output file path
    """
    formatter = FormatterFactory.create_formatter(format_type)
    formatted_output = formatter.format(results)

    if output_file:
        with open(output_file, 'w', newline='') as f:
            f.write(formatted_output)
    else:
        sys.stdout.write(formatted_output)
