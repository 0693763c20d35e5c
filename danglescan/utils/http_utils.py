"""HTTP utility functions for DANGLESCAN."""

import requests
from requests.adapters import HTTPAdapter
from typing import Optional, Tuple
import logging
from requests.exceptions import RequestException, Timeout, ConnectionError

from danglescan.core.exceptions import HttpRequestError, BodyReadError


class HTTPUtils:
    """HTTP client shared by all probes of a batch.

    Wraps one requests Session. Connection pooling is handled by urllib3, whose
    pools are thread-safe; the session itself is only read after construction.
    """

    def __init__(self, timeout: Optional[float] = None, user_agent: Optional[str] = None,
                 pool_maxsize: int = 100):
        """Initialize HTTP utilities.

        Args:
            timeout: HTTP request timeout in seconds (None waits indefinitely)
            user_agent: Custom User-Agent string
            pool_maxsize: Connections kept per host in the pool
        """
        self.timeout = timeout
        self.user_agent = user_agent or "danglescan/1.0"
        self.logger = logging.getLogger('danglescan.http_utils')
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': self.user_agent
        })
        adapter = HTTPAdapter(pool_connections=pool_maxsize, pool_maxsize=pool_maxsize)
        self.session.mount('http://', adapter)
        self.session.mount('https://', adapter)

    def fetch(self, url: str) -> Tuple[int, str]:
        """GET a URL and read its full body.

        The response is closed before returning on every path.

        Args:
            url: URL to fetch

        Returns:
            Tuple of (status_code, body_text)

        Raises:
            HttpRequestError: If no response could be obtained
            BodyReadError: If the status was received but the body could not be read
        """
        try:
            response = self.session.get(
                url,
                timeout=self.timeout,
                allow_redirects=True,
                stream=True
            )
        except Timeout as e:
            self.logger.debug(f"Timeout connecting to {url}")
            raise HttpRequestError(f"timeout connecting to {url}: {e}") from e
        except ConnectionError as e:
            self.logger.debug(f"Connection error for {url}")
            raise HttpRequestError(f"connection error for {url}: {e}") from e
        except RequestException as e:
            self.logger.debug(f"Request error for {url}: {e}")
            raise HttpRequestError(f"request error for {url}: {e}") from e
        except Exception as e:
            self.logger.debug(f"Unexpected error for {url}: {e}")
            raise HttpRequestError(f"unexpected error for {url}: {e}") from e

        with response:
            status = response.status_code
            try:
                content = response.content
            except Exception as e:
                self.logger.debug(f"Error reading body from {url}: {e}")
                raise BodyReadError(str(e), status_code=status) from e

        encoding = response.encoding or 'utf-8'
        try:
            body = content.decode(encoding, errors='replace')
        except LookupError:
            body = content.decode('utf-8', errors='replace')
        return status, body
