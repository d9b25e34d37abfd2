import threading

import httpx
import pytest
import requests

from lotr_sdk.core.exceptions import TransportError
from lotr_sdk.core.http_sync import HttpResponse, HttpxTransport, RequestsTransport, Transport

URL = "https://the-one-api.dev/v2/movie?limit=1"


def _httpx_transport(handler):
    return HttpxTransport(timeout=5.0, client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_transport_is_abstract():
    with pytest.raises(TypeError):
        Transport()


def test_response_headers_are_case_insensitive():
    response = HttpResponse(200, "{}", {"X-RateLimit-Limit": "100"})

    assert response.headers == {"x-ratelimit-limit": "100"}
    assert response.header("X-RATELIMIT-LIMIT") == "100"
    assert response.header("missing", "n/a") == "n/a"


def test_httpx_transport_sends_bearer_get():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["authorization"]
        seen["accept"] = request.headers["accept"]
        return httpx.Response(200, text='{"docs": []}', headers={"X-RateLimit-Remaining": "99"})

    response = _httpx_transport(handler).send(URL, "abc123")

    assert seen == {
        "method": "GET",
        "url": URL,
        "auth": "Bearer abc123",
        "accept": "application/json",
    }
    assert response.status_code == 200
    assert response.body == '{"docs": []}'
    assert response.header("x-ratelimit-remaining") == "99"


@pytest.mark.parametrize("status", [401, 429, 500])
def test_httpx_transport_returns_error_statuses_verbatim(status):
    response = _httpx_transport(lambda request: httpx.Response(status, text="nope")).send(URL, "k")

    assert response.status_code == status
    assert response.body == "nope"


def test_httpx_transport_wraps_network_errors():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as exc_info:
        _httpx_transport(handler).send(URL, "k")

    assert isinstance(exc_info.value.cause, httpx.ConnectError)
    assert exc_info.value.__cause__ is exc_info.value.cause
    assert exc_info.value.status_code == 0


def test_httpx_transport_closes_only_owned_client(mocker):
    client = mocker.Mock(spec=httpx.Client)
    HttpxTransport(client=client).close()
    client.close.assert_not_called()

    owned = HttpxTransport()
    owned.close()
    assert owned._client.is_closed


def test_requests_transport_sends_bearer_get(mocker):
    session = mocker.Mock(spec=requests.Session)
    session.get.return_value = mocker.Mock(status_code=404, text="missing", headers={"Content-Type": "text/plain"})

    response = RequestsTransport(timeout=(3.0, 7.0), session=session).send(URL, "abc123")

    session.get.assert_called_once()
    args, kwargs = session.get.call_args
    assert args == (URL,)
    assert kwargs["headers"]["Authorization"] == "Bearer abc123"
    assert kwargs["timeout"] == (3.0, 7.0)
    assert response.status_code == 404
    assert response.body == "missing"
    assert response.header("content-type") == "text/plain"


def test_requests_transport_wraps_network_errors(mocker):
    session = mocker.Mock(spec=requests.Session)
    session.get.side_effect = requests.Timeout("read timed out")

    with pytest.raises(TransportError, match="read timed out") as exc_info:
        RequestsTransport(session=session).send(URL, "k")

    assert isinstance(exc_info.value.cause, requests.Timeout)


def test_requests_transport_closes_only_owned_session(mocker):
    session = mocker.Mock(spec=requests.Session)
    RequestsTransport(session=session).close()
    session.close.assert_not_called()


def test_requests_transport_uses_one_session_per_thread(mocker):
    session_factory = mocker.patch(
        "lotr_sdk.core.http_sync.requests.Session",
        side_effect=lambda: mocker.Mock(get=mocker.Mock(return_value=mocker.Mock(status_code=200, text="{}", headers={}))),
    )
    transport = RequestsTransport()
    used = []

    def worker():
        transport.send(URL, "k")
        transport.send(URL, "k")
        used.append(transport._session())

    threads = [threading.Thread(target=worker) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert session_factory.call_count == 3
    assert len({id(s) for s in used}) == 3
    for session in used:
        assert session.get.call_count == 2

    transport.close()
    for session in used:
        session.close.assert_called_once_with()


def test_requests_transport_shares_supplied_session_across_threads(mocker):
    session = mocker.Mock(spec=requests.Session)
    session.get.return_value = mocker.Mock(status_code=200, text="{}", headers={})
    transport = RequestsTransport(session=session)

    threads = [threading.Thread(target=transport.send, args=(URL, "k")) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert session.get.call_count == 3
