"""DNS utility functions for DANGLESCAN.

This module wraps the CNAME lookup a probe performs. A single resolver instance
is shared by every probe in a batch; dnspython resolvers hold no per-query
state, so concurrent use from worker threads is safe.
"""

import logging
from dns.resolver import Resolver, NXDOMAIN, NoAnswer, Timeout, NoNameservers
import dns.exception

from danglescan.core.exceptions import DnsLookupError


class DNSUtils:
    """DNS helper for canonical name resolution.

    Attributes:
        timeout: DNS query lifetime in seconds
        logger: Logger instance for this class
        resolver: DNS resolver instance
    """

    def __init__(self, timeout: float = 5.0):
        """Initialize DNS utilities.

        Args:
            timeout: DNS query lifetime in seconds
        """
        self.timeout = timeout
        self.logger = logging.getLogger('danglescan.dns_utils')
        self.resolver = Resolver()
        self.resolver.timeout = timeout
        self.resolver.lifetime = timeout

    def resolve_cname(self, host: str) -> str:
        """Resolve the canonical name of a host.

        Returns the CNAME target as a fully qualified name with its trailing
        dot. A host that exists but is not an alias is its own canonical name.

        Args:
            host: Bare host name (no scheme)

        Returns:
            Canonical name of the host

        Raises:
            DnsLookupError: If the lookup fails
        """
        try:
            answers = self.resolver.resolve(host, 'CNAME')
            return answers[0].target.to_text()
        except NoAnswer:
            self.logger.debug(f"No CNAME record for {host}")
            return host if host.endswith('.') else f"{host}."
        except NXDOMAIN:
            self.logger.debug(f"Domain {host} does not exist")
            raise DnsLookupError(f"no such host {host}")
        except Timeout:
            self.logger.debug(f"Timeout resolving {host}")
            raise DnsLookupError(f"timeout resolving {host}")
        except NoNameservers:
            self.logger.debug(f"No nameservers available for {host}")
            raise DnsLookupError(f"no nameservers available for {host}")
        except dns.exception.DNSException as e:
            self.logger.debug(f"Error resolving {host}: {e}")
            raise DnsLookupError(f"error resolving {host}: {e}") from e
        except ValueError as e:
            # Names dnspython cannot encode, e.g. invalid IDNA labels
            self.logger.debug(f"Invalid host name {host!r}: {e}")
            raise DnsLookupError(f"invalid host name {host!r}: {e}") from e
