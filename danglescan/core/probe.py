"""Single-host takeover probe for DANGLESCAN.

A probe resolves the CNAME of one hostname, fetches it over HTTP and matches the
body against the signature catalog. Every network failure is recorded on the
returned ProbeResult; a probe never raises for them.
"""

import logging
from typing import Iterable, Optional

from danglescan.core.interfaces import ProbeResult
from danglescan.core.exceptions import DnsLookupError, HttpRequestError, BodyReadError
from danglescan.core.signatures import Signature, SIGNATURES, match_signature
from danglescan.utils.dns_utils import DNSUtils
from danglescan.utils.http_utils import HTTPUtils


def normalize_url(hostname: str) -> str:
    """Turn a hostname into a fetchable URL.

    Anything already starting with "http" is taken to carry a scheme.

    Args:
        hostname: Hostname, optionally with an http:// or https:// scheme

    Returns:
        URL to request
    """
    if not hostname.startswith('http'):
        return f"http://{hostname}"
    return hostname


def bare_host(url: str) -> str:
    """Strip the scheme from a URL for the DNS lookup."""
    for prefix in ('http://', 'https://'):
        if url.startswith(prefix):
            return url[len(prefix):]
    return url


class Probe:
    """Evaluates the takeover risk of one hostname at a time.

    A Probe is stateless between calls and can be run from many threads at once;
    the resolver and HTTP session it holds are shared.
    """

    def __init__(self, dns_utils: Optional[DNSUtils] = None,
                 http_utils: Optional[HTTPUtils] = None,
                 signatures: Iterable[Signature] = SIGNATURES):
        """Initialize the probe.

        Args:
            dns_utils: DNS helper used for CNAME lookups
            http_utils: Shared HTTP client
            signatures: Ordered signature catalog to match against
        """
        self.dns_utils = dns_utils or DNSUtils()
        self.http_utils = http_utils or HTTPUtils()
        self.signatures = tuple(signatures)
        self.logger = logging.getLogger('danglescan.probe')

    def run(self, hostname: str) -> ProbeResult:
        """Probe a single hostname.

        A DNS failure is recorded but the HTTP fetch is still attempted. An HTTP
        or body-read failure ends the probe as not vulnerable.

        Args:
            hostname: Hostname as supplied by the caller

        Returns:
            ProbeResult for the hostname
        """
        result = ProbeResult(subdomain=hostname)
        url = normalize_url(hostname)

        try:
            result.cname = self.dns_utils.resolve_cname(bare_host(url))
        except DnsLookupError as e:
            self.logger.debug(f"DNS lookup failed for {hostname}: {e}")
            result.error_message = f"DNS lookup failed: {e}"

        try:
            status, body = self.http_utils.fetch(url)
        except HttpRequestError as e:
            self.logger.debug(f"HTTP request failed for {hostname}: {e}")
            result.error_message = f"HTTP request failed: {e}"
            return result
        except BodyReadError as e:
            self.logger.debug(f"Failed to read response body for {hostname}: {e}")
            result.http_status = e.status_code
            result.error_message = f"Failed to read response body: {e}"
            return result

        result.http_status = status

        signature = match_signature(body, self.signatures)
        if signature:
            self.logger.info(f"{hostname} matches {signature.service} takeover signature")
            result.vulnerable = True
            result.service = signature.service

        return result
