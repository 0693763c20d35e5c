"""HTTP service exposing the probe coordinator.

Endpoint:
    POST /api/check   {"subdomains": [...]}  ->  {"results": [...]}

Each result record leaves out service, cname, http_status and error_message
when they are unset.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from flask import Flask, jsonify, request

from danglescan import __version__
from danglescan.core.coordinator import ProbeCoordinator
from danglescan.core.exceptions import ValidationError, ConfigurationError
from danglescan.utils.error_handler import ErrorHandler

logger = logging.getLogger('danglescan.server')

DEFAULT_HOST = os.getenv("DANGLESCAN_HOST", "0.0.0.0")
DEFAULT_PORT = int(os.getenv("DANGLESCAN_PORT", "8080"))
DEFAULT_TIMEOUT = os.getenv("DANGLESCAN_TIMEOUT")


def parse_payload(payload) -> List[str]:
    """Extract the hostname list from a decoded request body.

    A missing or null "subdomains" key is an empty batch.

    Raises:
        ValidationError: If the payload is not an object or the list is malformed
    """
    if not isinstance(payload, dict):
        raise ValidationError("Invalid request payload")

    subdomains = payload.get("subdomains")
    if subdomains is None:
        return []
    if not isinstance(subdomains, list) or not all(isinstance(s, str) for s in subdomains):
        raise ValidationError("Invalid request payload")
    return subdomains


def create_app(coordinator: Optional[ProbeCoordinator] = None) -> Flask:
    """Build the Flask application.

    Args:
        coordinator: Coordinator that runs the batches (a default one is built if omitted)

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)
    app.config["COORDINATOR"] = coordinator or ProbeCoordinator()

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return jsonify({"error": "Invalid request method"}), 405

    @app.route("/api/check", methods=["POST"])
    def check():
        payload = request.get_json(force=True, silent=True)
        try:
            subdomains = parse_payload(payload)
        except ValidationError as e:
            logger.debug(f"Rejected request: {e}")
            return jsonify({"error": str(e)}), 400

        results = app.config["COORDINATOR"].check_subdomains(subdomains)
        return jsonify({"results": [result.to_dict() for result in results]})

    return app


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the HTTP service."""
    parser = argparse.ArgumentParser(
        prog='danglescan-server',
        description='Serve the DANGLESCAN subdomain takeover check over HTTP'
    )
    parser.add_argument('--host', default=DEFAULT_HOST,
                        help=f'Interface to bind (default: {DEFAULT_HOST})')
    parser.add_argument('--port', type=int, default=DEFAULT_PORT,
                        help=f'Port to listen on (default: {DEFAULT_PORT})')
    parser.add_argument('--timeout', type=float,
                        default=float(DEFAULT_TIMEOUT) if DEFAULT_TIMEOUT else None,
                        help='HTTP timeout for probes in seconds (default: wait indefinitely)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    args = parser.parse_args(argv)

    error_handler = ErrorHandler(verbose=args.verbose)

    try:
        app = create_app(ProbeCoordinator(timeout=args.timeout))
    except ConfigurationError as e:
        error_handler.handle_error('input', str(e))
        return 1

    logger.info(f"Server is running on port {args.port}")
    try:
        app.run(host=args.host, port=args.port)
    except OSError as e:
        error_handler.log_error("Failed to start server", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
