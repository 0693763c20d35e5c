"""Probe coordinator for orchestrating a batch of subdomain probes."""

import concurrent.futures
import logging
from typing import List, Optional, Sequence

from danglescan.core.interfaces import ProbeResult
from danglescan.core.probe import Probe
from danglescan.core.exceptions import ConfigurationError
from danglescan.utils.dns_utils import DNSUtils
from danglescan.utils.http_utils import HTTPUtils
from danglescan.utils.progress import progress_bar


class ProbeCoordinator:
    """Runs one probe per hostname concurrently and gathers the results.

    Every hostname in a batch gets its own worker thread; there is no cap on
    fan-out, so a batch of N hostnames runs N probes at once. All probes share
    one resolver and one HTTP session.
    """

    def __init__(self, probe: Optional[Probe] = None, timeout: Optional[float] = None,
                 dns_timeout: float = 5.0, user_agent: Optional[str] = None,
                 show_progress: bool = False):
        """Initialize the probe coordinator.

        Args:
            probe: Probe instance to use (built from the other options if omitted)
            timeout: HTTP timeout in seconds (None waits indefinitely)
            dns_timeout: DNS query lifetime in seconds
            user_agent: Custom User-Agent string
            show_progress: Whether to show a progress bar on stderr

        Raises:
            ConfigurationError: If a timeout is not positive
        """
        if timeout is not None and timeout <= 0:
            raise ConfigurationError("HTTP timeout must be positive")
        if dns_timeout <= 0:
            raise ConfigurationError("DNS timeout must be positive")

        self.probe = probe or Probe(
            dns_utils=DNSUtils(timeout=dns_timeout),
            http_utils=HTTPUtils(timeout=timeout, user_agent=user_agent)
        )
        self.show_progress = show_progress
        self.logger = logging.getLogger('danglescan.coordinator')

    def check_subdomains(self, hostnames: Sequence[str]) -> List[ProbeResult]:
        """Probe every hostname and return once all probes have finished.

        Duplicates are probed independently. Results come back in input order.

        Args:
            hostnames: Hostnames to probe

        Returns:
            One ProbeResult per input hostname
        """
        hostnames = list(hostnames)
        if not hostnames:
            return []

        self.logger.info(f"Probing {len(hostnames)} subdomains")
        results: List[Optional[ProbeResult]] = [None] * len(hostnames)

        with progress_bar(total=len(hostnames),
                          desc="Probing subdomains",
                          disable=not self.show_progress,
                          unit="host") as progress:
            with concurrent.futures.ThreadPoolExecutor(max_workers=len(hostnames)) as executor:
                future_to_index = {
                    executor.submit(self.probe.run, hostname): index
                    for index, hostname in enumerate(hostnames)
                }

                for future in concurrent.futures.as_completed(future_to_index):
                    index = future_to_index[future]
                    try:
                        results[index] = future.result()
                    except Exception as e:
                        self.logger.error(f"Unexpected error probing {hostnames[index]}: {e}")
                        results[index] = ProbeResult(
                            subdomain=hostnames[index],
                            error_message=f"Unexpected error: {e}"
                        )
                    progress.update(1)

        vulnerable = sum(1 for result in results if result.vulnerable)
        self.logger.info(f"Probed {len(results)} subdomains, {vulnerable} vulnerable")
        return results


def check_subdomains(hostnames: Sequence[str], **kwargs) -> List[ProbeResult]:
    """Probe a batch of hostnames with a fresh coordinator.

    Args:
        hostnames: Hostnames to probe
        **kwargs: Options passed to ProbeCoordinator

    Returns:
        One ProbeResult per input hostname, in input order
    """
    return ProbeCoordinator(**kwargs).check_subdomains(hostnames)
