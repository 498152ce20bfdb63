"""
Unit tests for RequestGateway, its middleware and failure normalization.
All HTTP calls are mocked — no network access required.
"""

import sys
import logging
import pytest
from unittest.mock import MagicMock
from pathlib import Path

import requests

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dhartisetu.config import Settings
from dhartisetu.gateway.client import RequestGateway
from dhartisetu.gateway.middleware import RequestLogger

BASE_URL = "https://backend.test/api/v1"


def _ok_response(body):
    resp = MagicMock()
    resp.content = b"{}"
    resp.json.return_value = body
    resp.raise_for_status = MagicMock()
    return resp


def _error_response(status, body=None):
    resp = MagicMock()
    resp.status_code = status
    resp.content = b"error"
    if body is None:
        resp.json.side_effect = ValueError("no json")
        resp.text = ""
    else:
        resp.json.return_value = body
        resp.text = str(body)
    resp.raise_for_status.side_effect = requests.exceptions.HTTPError(
        f"{status} Server Error", response=resp,
    )
    return resp


@pytest.fixture
def session():
    mock_session = MagicMock()
    mock_session.headers = {}
    return mock_session


@pytest.fixture
def gateway(session):
    return RequestGateway(Settings(base_url=BASE_URL), session=session)


# ---------- Success path ----------

class TestSendSuccess:
    def test_returns_body_unchanged(self, gateway, session):
        """Decoded body is passed through as-is, not wrapped."""
        body = {"result": "healthy_leaf", "confidence": 0.92}
        session.request.return_value = _ok_response(body)

        result = gateway.send("POST", "/plant-disease/detect-base64", body={"image_data": "abc"})

        assert result == body

    def test_request_composition(self, gateway, session):
        session.request.return_value = _ok_response({"ok": True})

        gateway.send("post", "/crop/recommend", body={"N": 90})

        session.request.assert_called_once_with(
            "POST",
            f"{BASE_URL}/crop/recommend",
            json={"N": 90},
            data=None,
            files=None,
            headers=None,
            timeout=120.0,
        )

    def test_default_headers_applied_to_session(self, gateway, session):
        assert session.headers["Content-Type"] == "application/json"

    def test_multipart_sends_form_fields(self, gateway, session):
        session.request.return_value = _ok_response({"ok": True})

        gateway.send(
            "POST", "/soil/detect",
            body={"language": "en"},
            files={"file": ("soil.jpg", b"img")},
            headers={"Content-Type": None},
        )

        kwargs = session.request.call_args.kwargs
        assert kwargs["json"] is None
        assert kwargs["data"] == {"language": "en"}
        assert kwargs["files"] == {"file": ("soil.jpg", b"img")}
        assert kwargs["headers"] == {"Content-Type": None}

    def test_timeout_override(self, gateway, session):
        session.request.return_value = _ok_response({})

        gateway.send("GET", "/location/states", timeout=5)

        assert session.request.call_args.kwargs["timeout"] == 5

    def test_empty_body_decodes_to_none(self, gateway, session):
        resp = _ok_response(None)
        resp.content = b""
        session.request.return_value = resp

        assert gateway.send("GET", "/location/states") is None
        resp.json.assert_not_called()

    def test_unsupported_method_raises(self, gateway, session):
        with pytest.raises(ValueError, match="Unsupported HTTP method"):
            gateway.send("DELETE", "/crop/recommend")
        session.request.assert_not_called()


# ---------- Failure normalization ----------

class TestSendFailure:
    def _assert_failure(self, result):
        assert result["success"] is False
        assert result["error"] is True
        assert result["data"] is None
        assert isinstance(result["message"], str) and result["message"]

    def test_http_error_prefers_detail(self, gateway, session):
        session.request.return_value = _error_response(
            500, {"detail": "model unavailable", "message": "ignored"},
        )

        result = gateway.send("POST", "/plant-disease/detect")

        self._assert_failure(result)
        assert result["message"] == "model unavailable"

    def test_http_error_falls_back_to_message(self, gateway, session):
        session.request.return_value = _error_response(400, {"message": "bad crop name"})

        result = gateway.send("POST", "/yield/predict")

        assert result["message"] == "bad crop name"

    def test_http_error_without_body_uses_exception_text(self, gateway, session):
        session.request.return_value = _error_response(502)

        result = gateway.send("GET", "/yield/crops")

        assert result["message"] == "502 Server Error"

    def test_validation_detail_list_flattened(self, gateway, session):
        detail = [
            {"loc": ["body", "N"], "msg": "field required", "type": "missing"},
            {"loc": ["body", "ph"], "msg": "value too large", "type": "le"},
        ]
        session.request.return_value = _error_response(422, {"detail": detail})

        result = gateway.send("POST", "/crop/recommend")

        assert result["message"] == "field required; value too large"

    def test_connection_error_resolves(self, gateway, session):
        """Network failures come back as values, never raised."""
        session.request.side_effect = requests.exceptions.ConnectionError("Connection refused")

        result = gateway.send("GET", "/location/states")

        self._assert_failure(result)
        assert result["message"] == "Connection refused"

    def test_timeout_resolves(self, gateway, session):
        session.request.side_effect = requests.exceptions.Timeout("Read timed out")

        result = gateway.send("POST", "/flood/predict", body={})

        self._assert_failure(result)
        assert result["message"] == "Read timed out"

    def test_error_without_text_uses_fixed_fallback(self, gateway, session):
        session.request.side_effect = requests.exceptions.ConnectionError()

        result = gateway.send("GET", "/location/states")

        assert result["message"] == "Server error"

    def test_undecodable_body_resolves(self, gateway, session):
        resp = _ok_response(None)
        resp.content = b"<html>"
        resp.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        session.request.return_value = resp

        result = gateway.send("GET", "/yield/seasons")

        self._assert_failure(result)

    def test_unhandled_error_propagates_without_normalizer(self, session):
        gateway = RequestGateway(
            Settings(base_url=BASE_URL), session=session, middlewares=[RequestLogger()],
        )
        session.request.side_effect = requests.exceptions.ConnectionError("down")

        with pytest.raises(requests.exceptions.ConnectionError):
            gateway.send("GET", "/location/states")


# ---------- Logging ----------

class TestRequestLogging:
    def test_one_api_line_per_call(self, gateway, session, caplog):
        session.request.return_value = _ok_response({})
        caplog.set_level(logging.INFO, logger="dhartisetu")

        gateway.send("post", "/water/calculate", body={})

        api_lines = [r.getMessage() for r in caplog.records if r.getMessage().startswith("[API]")]
        assert api_lines == [f"[API] POST {BASE_URL}/water/calculate"]

    def test_api_line_logged_at_info(self, gateway, session, caplog):
        session.request.return_value = _ok_response({})
        caplog.set_level(logging.INFO, logger="dhartisetu")

        gateway.send("GET", "/location/states")

        record = next(r for r in caplog.records if r.getMessage().startswith("[API]"))
        assert record.levelno == logging.INFO
        assert record.name.startswith("dhartisetu.")

    def test_logged_before_failed_call(self, gateway, session, caplog):
        session.request.side_effect = requests.exceptions.ConnectionError("down")
        caplog.set_level(logging.INFO, logger="dhartisetu")

        gateway.send("GET", "/location/states")

        messages = [r.getMessage() for r in caplog.records]
        assert messages[0] == f"[API] GET {BASE_URL}/location/states"
        assert any(m.startswith("API Error:") for m in messages[1:])
        error_records = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(error_records) == 1

    def test_error_log_prefers_server_body(self, gateway, session, caplog):
        session.request.return_value = _error_response(500, {"detail": "model unavailable"})
        caplog.set_level(logging.INFO, logger="dhartisetu")

        gateway.send("POST", "/plant-disease/detect")

        error_records = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert "model unavailable" in error_records[0].getMessage()


# ---------- Normalize helpers ----------

class TestNormalize:
    def test_normalized_failure_shape(self):
        from dhartisetu.gateway.normalize import normalized_failure

        assert normalized_failure("boom") == {
            "success": False, "error": True, "message": "boom", "data": None,
        }

    def test_empty_message_gets_fallback(self):
        from dhartisetu.gateway.normalize import normalized_failure

        assert normalized_failure("")["message"] == "Server error"

    def test_is_failure(self):
        from dhartisetu.gateway.normalize import is_failure

        assert is_failure(None) is True
        assert is_failure({"error": True, "message": "x"}) is True
        assert is_failure({"result": "healthy_leaf"}) is False
        assert is_failure({"error": False, "result": 1}) is False
        assert is_failure([1, 2, 3]) is False

    def test_failure_message(self):
        from dhartisetu.gateway.normalize import failure_message

        assert failure_message({"error": True, "message": "x"}, "d") == "x"
        assert failure_message({"error": True}, "d") == "d"
        assert failure_message({"error": True, "message": 42}, "d") == "42"
        assert failure_message(None, "d") == "d"
