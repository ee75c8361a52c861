"""Unit tests for the HTTP transport."""

from unittest.mock import patch

import pytest
import requests
import responses

from translink_rtti.core.exceptions import NetworkError
from translink_rtti.core.http import HttpTransport, redact_api_key

URL = "https://api.example.com/resource"


class TestHttpTransport:
    """Test GET and POST helpers."""

    def test_default_timeouts(self):
        transport = HttpTransport()
        assert transport.timeout == (10, None)

    @responses.activate
    def test_get_returns_status_and_body(self):
        responses.add(responses.GET, URL, body='{"ok": true}', status=200)

        with HttpTransport() as transport:
            response = transport.get(URL, headers={"Accept": "application/json"})

        assert response.status_code == 200
        assert response.content == '{"ok": true}'
        assert response.json_content() == {"ok": True}
        assert responses.calls[0].request.headers["Accept"] == "application/json"

    @responses.activate
    def test_get_follows_redirects(self):
        responses.add(
            responses.GET,
            URL,
            status=302,
            headers={"Location": "https://api.example.com/moved"},
        )
        responses.add(responses.GET, "https://api.example.com/moved", body="[]")

        response = HttpTransport().get(URL)

        assert response.status_code == 200
        assert response.url == "https://api.example.com/moved"

    @responses.activate
    def test_error_status_is_returned_not_raised(self):
        responses.add(responses.GET, URL, body="nope", status=500)

        response = HttpTransport().get(URL)

        assert response.status_code == 500
        assert not response.ok

    @responses.activate
    def test_get_connection_failure(self):
        responses.add(
            responses.GET, URL, body=requests.exceptions.ConnectionError("refused")
        )

        with pytest.raises(NetworkError, match="refused"):
            HttpTransport().get(URL)

    def test_get_passes_timeout_and_ssl_flag(self):
        transport = HttpTransport(connect_timeout=5)
        with patch.object(transport.session, "request") as mock_request:
            mock_request.return_value.status_code = 200
            mock_request.return_value.text = ""
            mock_request.return_value.url = URL

            transport.get(URL, ssl_verify=False)

        mock_request.assert_called_once_with(
            "GET",
            URL,
            timeout=(5, None),
            headers={},
            verify=False,
            allow_redirects=True,
        )

    @responses.activate
    def test_post_string_body_sets_content_length(self):
        responses.add(responses.POST, URL, body="created", status=201)

        response = HttpTransport().post(URL, "name=bus", headers={"X-Test": "1"})

        request = responses.calls[0].request
        assert response.status_code == 201
        assert request.body == b"name=bus"
        assert request.headers["Content-Length"] == "8"
        assert request.headers["X-Test"] == "1"

    @responses.activate
    def test_post_mapping_is_form_encoded(self):
        responses.add(responses.POST, URL, body="ok")

        HttpTransport().post(URL, {"stopNo": 60980, "routeNo": "099"})

        assert responses.calls[0].request.body == b"stopNo=60980&routeNo=099"

    @responses.activate
    def test_post_connection_failure(self):
        responses.add(responses.POST, URL, body=requests.exceptions.Timeout("slow"))

        with pytest.raises(NetworkError):
            HttpTransport().post(URL, b"{}")


class TestRedactApiKey:
    """Test API key masking in log and error text."""

    def test_redacts_query_parameter(self):
        url = "https://api.translink.ca/rttiapi/v1/buses?apikey=secret&routeNo=099"
        assert redact_api_key(url) == (
            "https://api.translink.ca/rttiapi/v1/buses?apikey=***&routeNo=099"
        )

    def test_text_without_key_unchanged(self):
        assert redact_api_key("Connection refused") == "Connection refused"
