"""Unit tests for the requests-based requester."""

from unittest.mock import Mock, patch

import requests  # type: ignore[import-untyped]

from ydict.core.requester import RequestsRequester
from ydict.exceptions import TransportError


class TestRequestsRequester:
    """Test class for RequestsRequester."""

    def setup_method(self):
        self.requester = RequestsRequester(timeout=5)
        self.done = Mock()
        self.fail = Mock()

    def test_browser_headers(self):
        headers = self.requester.session.headers
        assert "Mozilla" in headers["User-Agent"]
        assert headers["Referer"] == "https://dict.youdao.com/"

    @patch("ydict.core.requester.requests.Session.get")
    def test_success_calls_done_once(self, mock_get):
        mock_response = Mock()
        mock_response.content = b"<html></html>"
        mock_response.raise_for_status.return_value = None
        mock_get.return_value = mock_response

        self.requester.request("https://dict.youdao.com/x", self.done, self.fail)

        self.done.assert_called_once_with(b"<html></html>")
        self.fail.assert_not_called()
        mock_get.assert_called_once_with("https://dict.youdao.com/x", timeout=5)

    @patch("ydict.core.requester.requests.Session.get")
    def test_network_error_calls_fail_once(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("Connection refused")

        self.requester.request("https://dict.youdao.com/x", self.done, self.fail)

        self.done.assert_not_called()
        self.fail.assert_called_once()
        error = self.fail.call_args.args[0]
        assert isinstance(error, TransportError)
        assert error.message == "Connection refused"
        assert error.url == "https://dict.youdao.com/x"

    @patch("ydict.core.requester.requests.Session.get")
    def test_http_error_status_calls_fail(self, mock_get):
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.HTTPError(
            "503 Server Error"
        )
        mock_get.return_value = mock_response

        self.requester.request("https://dict.youdao.com/x", self.done, self.fail)

        self.done.assert_not_called()
        assert self.fail.call_args.args[0].message == "503 Server Error"
