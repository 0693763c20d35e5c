"""Takeover signature catalog for DANGLESCAN.

Each signature pairs a third-party service with the text its error page shows
when the resource a subdomain points at has been deprovisioned. The catalog is
built once at import time and never mutated; it is scanned in order and the
first matching entry wins.
"""

import re
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

logger = logging.getLogger('danglescan.signatures')


@dataclass(frozen=True)
class Signature:
    """A known "unclaimed resource" error page.

    Attributes:
        service: Name of the third-party service
        pattern: Compiled regular expression searched for anywhere in the body
    """
    service: str
    pattern: re.Pattern


SIGNATURES = (
    Signature("AWS/S3", re.compile(r"The specified bucket does not exist")),
    Signature("GitHub", re.compile(r"There isn't a GitHub Pages site here")),
    Signature("Heroku", re.compile(r"no such app")),
    Signature("Fastly", re.compile(r"Fastly error: unknown domain")),
    Signature("Shopify", re.compile(r"Sorry, this shop is currently unavailable.")),
    Signature("BitBucket", re.compile(r"Repository not found")),
)


def match_signature(text: str, signatures: Iterable[Signature] = SIGNATURES) -> Optional[Signature]:
    """Find the first signature whose pattern occurs in the text.

    An entry that fails while being tested counts as no match for that entry
    only; the remaining entries are still tried.

    Args:
        text: Response body to inspect
        signatures: Ordered signatures to scan (defaults to the catalog)

    Returns:
        The first matching Signature, or None if nothing matched
    """
    for signature in signatures:
        try:
            if signature.pattern.search(text):
                return signature
        except Exception as e:
            logger.debug(f"Signature {signature.service} could not be tested: {e}")
    return None
