"""
Integration tests for the HTTP service.
"""
import pytest
from unittest.mock import patch, MagicMock

from danglescan.server import create_app, parse_payload, main
from danglescan.core.coordinator import ProbeCoordinator
from danglescan.core.interfaces import ProbeResult
from danglescan.core.exceptions import ValidationError, HttpRequestError


class TestParsePayload:
    """Test request payload validation."""

    def test_valid(self):
        """Test a well-formed payload."""
        assert parse_payload({"subdomains": ["a.example.com"]}) == ["a.example.com"]

    def test_missing_or_null_list(self):
        """Test a missing or null list is an empty batch."""
        assert parse_payload({}) == []
        assert parse_payload({"subdomains": None}) == []

    @pytest.mark.parametrize("payload", [
        None,
        ["a.example.com"],
        {"subdomains": "a.example.com"},
        {"subdomains": ["a.example.com", 42]},
    ])
    def test_invalid(self, payload):
        """Test malformed payloads are rejected."""
        with pytest.raises(ValidationError):
            parse_payload(payload)


class TestServer:
    """Test the /api/check endpoint."""

    @pytest.fixture
    def coordinator(self):
        """Mock coordinator that echoes each hostname."""
        coordinator = MagicMock()
        coordinator.check_subdomains.side_effect = lambda hostnames: [
            ProbeResult(subdomain=h, http_status=200) for h in hostnames
        ]
        return coordinator

    @pytest.fixture
    def client(self, coordinator):
        """Flask test client."""
        app = create_app(coordinator)
        app.config["TESTING"] = True
        return app.test_client()

    def test_check(self, client, coordinator):
        """Test a batch is probed and encoded."""
        response = client.post("/api/check", json={"subdomains": ["a.example.com", "b.example.com"]})

        assert response.status_code == 200
        assert response.get_json() == {
            "results": [
                {"subdomain": "a.example.com", "vulnerable": False, "http_status": 200},
                {"subdomain": "b.example.com", "vulnerable": False, "http_status": 200},
            ]
        }
        coordinator.check_subdomains.assert_called_once_with(["a.example.com", "b.example.com"])

    def test_check_without_content_type(self, client):
        """Test the body is decoded as JSON whatever the content type."""
        response = client.post("/api/check", data='{"subdomains": ["a.example.com"]}',
                               content_type="text/plain")

        assert response.status_code == 200
        assert len(response.get_json()["results"]) == 1

    def test_empty_batch(self, client):
        """Test an empty batch returns an empty list."""
        response = client.post("/api/check", json={"subdomains": []})

        assert response.status_code == 200
        assert response.get_json() == {"results": []}

    def test_invalid_json(self, client, coordinator):
        """Test an undecodable body is rejected."""
        response = client.post("/api/check", data="not json", content_type="application/json")

        assert response.status_code == 400
        assert response.get_json() == {"error": "Invalid request payload"}
        coordinator.check_subdomains.assert_not_called()

    def test_wrong_method(self, client):
        """Test methods other than POST are rejected."""
        response = client.get("/api/check")

        assert response.status_code == 405
        assert response.get_json() == {"error": "Invalid request method"}

    def test_end_to_end_encoding(self):
        """Test failed probes come back as data with unset fields omitted."""
        probe = MagicMock()
        probe.run.side_effect = lambda hostname: ProbeResult(
            subdomain=hostname,
            cname=f"{hostname}.",
            error_message="HTTP request failed: connection error"
        )
        app = create_app(ProbeCoordinator(probe=probe))

        response = app.test_client().post("/api/check", json={"subdomains": ["down.example.com"]})

        assert response.status_code == 200
        assert response.get_json() == {
            "results": [{
                "subdomain": "down.example.com",
                "vulnerable": False,
                "cname": "down.example.com.",
                "error_message": "HTTP request failed: connection error",
            }]
        }


class TestServerMain:
    """Test the service entry point."""

    @patch('danglescan.server.create_app')
    def test_main_runs_app(self, mock_create_app):
        """Test main binds the app to the requested address."""
        mock_app = MagicMock()
        mock_create_app.return_value = mock_app

        exit_code = main(['--host', '127.0.0.1', '--port', '9090', '--timeout', '15'])

        assert exit_code == 0
        coordinator = mock_create_app.call_args[0][0]
        assert coordinator.probe.http_utils.timeout == 15
        mock_app.run.assert_called_once_with(host='127.0.0.1', port=9090)

    @patch('danglescan.server.create_app')
    def test_main_bind_failure(self, mock_create_app):
        """Test a failure to bind exits with status 1."""
        mock_app = MagicMock()
        mock_app.run.side_effect = OSError("Address already in use")
        mock_create_app.return_value = mock_app

        assert main(['--port', '9090']) == 1

    def test_main_invalid_timeout(self):
        """Test a non-positive timeout is an input error."""
        with pytest.raises(SystemExit) as excinfo:
            main(['--timeout', '0'])

        assert excinfo.value.code == 1
