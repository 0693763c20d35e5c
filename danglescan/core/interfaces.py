"""Base interfaces and data models for DANGLESCAN components.

This module defines the data models shared by the probing engine and its adapters,
and the abstract base class output formatters implement.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class ProbeResult:
    """Data model representing the outcome of probing one subdomain.

    Exactly one result is produced per requested hostname, whatever failed along
    the way. ``vulnerable`` and ``service`` are set together.

    Attributes:
        subdomain: The hostname exactly as it was requested
        vulnerable: True if the response matched a takeover signature
        service: Name of the matched service (only when vulnerable)
        cname: Canonical name returned by the CNAME lookup
        http_status: HTTP status code of the response
        error_message: Description of the first failure point, if any
    """
    subdomain: str
    vulnerable: bool = False
    service: Optional[str] = None
    cname: Optional[str] = None
    http_status: Optional[int] = None
    error_message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to its wire representation.

        Optional fields are left out entirely when unset rather than being
        encoded as null.

        Returns:
            Dictionary with the keys subdomain, vulnerable and whichever of
            service, cname, http_status and error_message are set
        """
        data = {
            'subdomain': self.subdomain,
            'vulnerable': self.vulnerable,
        }
        if self.service:
            data['service'] = self.service
        if self.cname:
            data['cname'] = self.cname
        if self.http_status:
            data['http_status'] = self.http_status
        if self.error_message:
            data['error_message'] = self.error_message
        return data


class OutputFormatter(ABC):
    """Base interface for output formatters."""

    @abstractmethod
    def format(self, results: List[ProbeResult]) -> str:
        """Format a batch of probe results for output.

        Args:
            results: Probe results to format

        Returns:
            Formatted string representation in the specific output format
        """
        pass
