"""
DANGLESCAN - Dangling subdomain takeover scanner

Resolves the CNAME of each candidate subdomain, fetches it over HTTP and
matches the response against known third-party "unclaimed resource" error
pages to flag subdomains that can be taken over.
"""

__version__ = "1.0.0"
__author__ = "DANGLESCAN Development Team"
