"""
Pytest configuration file for DANGLESCAN tests.
"""
import os
import sys
import pytest
from unittest.mock import MagicMock

# Add the parent directory to sys.path to allow importing danglescan
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from danglescan.core.probe import Probe


# Common fixtures for tests
@pytest.fixture
def sample_subdomains():
    """Return a list of sample subdomains for testing."""
    return [
        "www.example.com",
        "shop.example.com",
        "assets.example.com",
        "docs.example.com",
        "legacy.example.com"
    ]

@pytest.fixture
def mock_dns_utils():
    """Return a DNS helper whose lookups succeed with a fixed CNAME."""
    dns_utils = MagicMock()
    dns_utils.resolve_cname.return_value = "target.example.net."
    return dns_utils

@pytest.fixture
def mock_http_utils():
    """Return an HTTP helper that serves an empty 200 page."""
    http_utils = MagicMock()
    http_utils.fetch.return_value = (200, "")
    return http_utils

@pytest.fixture
def probe(mock_dns_utils, mock_http_utils):
    """Return a probe wired to the mocked DNS and HTTP helpers."""
    return Probe(dns_utils=mock_dns_utils, http_utils=mock_http_utils)
