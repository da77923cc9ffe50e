"""Unit tests for src.gitget.http_client covering headers and error reporting.

Run with coverage:
    pytest tests/test_http_client.py --maxfail=1 -v --cov=src.gitget.http_client --cov-report=term-missing
"""

from typing import Any, Dict
from unittest.mock import MagicMock, patch

from src.gitget import http_client


def _make_resp(status: int = 200, payload: Any = None, headers: Dict[str, str] | None = None):
    resp = MagicMock()
    resp.status_code = status
    resp.headers = headers or {}
    if payload is None:
        payload = {}
    resp.json.return_value = payload
    resp.text = str(payload)
    return resp


def test_session_carries_static_headers_only():
    assert http_client.SESSION.headers["Accept"] == "application/vnd.github.v3+json"
    assert "Authorization" not in http_client.SESSION.headers


def test_request_headers_with_and_without_token(monkeypatch):
    monkeypatch.setattr(http_client, "TIME_ZONE", "America/Chicago")
    assert http_client.request_headers(None) == {"Time-Zone": "America/Chicago"}
    headers = http_client.request_headers("abc")
    assert headers["Authorization"] == "token abc"

    monkeypatch.setattr(http_client, "TIME_ZONE", "")
    assert http_client.request_headers(None) == {}


def test_log_http_error_handles_json_and_text(capsys):
    resp = _make_resp(404, {"message": "Not Found"})
    http_client.log_http_error(resp, "url")
    err = capsys.readouterr().err
    assert "HTTP 404" in err and "Not Found" in err

    resp = _make_resp(502)
    resp.json.side_effect = ValueError()
    resp.text = "bad gateway"
    http_client.log_http_error(resp, "url")
    assert "bad gateway" in capsys.readouterr().err


def test_describe_http_error_non_dict_body():
    resp = _make_resp(500, ["oops"])
    assert "oops" in http_client.describe_http_error(resp)


@patch("src.gitget.http_client.SESSION")
def test_get_once_sends_single_request(mock_session, monkeypatch):
    monkeypatch.setattr(http_client, "REQUEST_TIMEOUT", None)
    mock_session.get.return_value = _make_resp(200, [])
    resp = http_client.get_once("https://api.github.com/x", params={"a": 1}, credential="tok")
    assert resp.status_code == 200
    mock_session.get.assert_called_once()
    kwargs = mock_session.get.call_args.kwargs
    assert kwargs["params"] == {"a": 1}
    assert kwargs["headers"]["Authorization"] == "token tok"
    assert kwargs["timeout"] is None


@patch("src.gitget.http_client.SESSION")
def test_get_once_uses_caller_session(mock_shared):
    own_session = MagicMock()
    own_session.get.return_value = _make_resp(200, [])
    http_client.get_once("https://api.github.com/x", session=own_session)
    own_session.get.assert_called_once()
    mock_shared.get.assert_not_called()
