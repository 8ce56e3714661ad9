import httpx
import pytest

from core.errors import APIError, DecodeError, TransportError
from infrastructure.api import HTTPTransport

URL = "https://api.test/data/v4/players/abc"


def _transport(handler, api_key="  tok-123  ", timeout=2.5):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HTTPTransport(api_key, timeout, client=client)


def test_every_request_carries_json_and_bearer_headers():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    result = _transport(handler).get(URL, lambda body: body)

    assert result == {"ok": True}
    headers = seen[0].headers
    assert headers["Authorization"] == "Bearer tok-123"
    assert headers["Content-Type"] == "application/json; charset=utf-8"
    assert headers["Accept"] == "application/json; charset=utf-8"


def test_redirect_range_status_is_still_decoded():
    t = _transport(lambda r: httpx.Response(304, json={"cached": 1}))
    assert t.get(URL, lambda body: body["cached"]) == 1


def test_success_with_invalid_json_is_a_decode_error():
    t = _transport(lambda r: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(DecodeError):
        t.get(URL, lambda body: body)


def test_decoder_shape_failure_is_a_decode_error():
    t = _transport(lambda r: httpx.Response(200, json=[1, 2, 3]))
    with pytest.raises(DecodeError, match="unexpected response shape"):
        t.get(URL, lambda body: body["player_id"])


def test_decoder_overflow_is_a_decode_error():
    t = _transport(lambda r: httpx.Response(200, text='{"elo": 1e999}'))
    with pytest.raises(DecodeError, match="unexpected response shape"):
        t.get(URL, lambda body: int(body["elo"]))


def test_string_error_code_is_kept_as_text():
    t = _transport(lambda r: httpx.Response(403, json={"code": "err_f0", "message": "Forbidden"}))

    with pytest.raises(APIError) as exc_info:
        t.get(URL, lambda body: body)

    assert exc_info.value.code == "err_f0"


def test_error_envelope_message_is_used_verbatim():
    t = _transport(lambda r: httpx.Response(404, json={"code": "err_nf0", "message": "The resource was not found."}))

    with pytest.raises(APIError) as exc_info:
        t.get(URL, lambda body: body)

    err = exc_info.value
    assert str(err) == "The resource was not found."
    assert err.status_code == 404
    assert err.code == "err_nf0"


def test_undecodable_error_body_falls_back_to_status_message():
    t = _transport(lambda r: httpx.Response(502, text="Bad Gateway"))

    with pytest.raises(APIError) as exc_info:
        t.get(URL, lambda body: body)

    assert "502" in str(exc_info.value)
    assert str(exc_info.value) == "unknown error, status code: 502"


def test_error_body_without_message_falls_back_to_status_message():
    t = _transport(lambda r: httpx.Response(401, json={"errors": [{"code": "auth"}]}))

    with pytest.raises(APIError, match="status code: 401"):
        t.get(URL, lambda body: body)


def test_timeout_is_a_transport_error_without_retry():
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(TransportError, match="timed out after 2.5s"):
        _transport(handler).get(URL, lambda body: body)
    assert len(calls) == 1


def test_connection_failure_is_a_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError, match="connection refused"):
        _transport(handler).get(URL, lambda body: body)


def test_injected_client_is_not_closed_by_transport():
    client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
    with HTTPTransport("tok", 1.0, client=client):
        pass
    assert not client.is_closed
    client.close()
