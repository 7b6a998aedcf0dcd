import json

import httpx
import pytest

from birthday_notifier.exceptions import TransportError
from birthday_notifier.models import NotifyTarget
from birthday_notifier.notifier import WebhookNotifier

TARGET = NotifyTarget(webhook_url="https://hooks.example.com/services/T/B/secret", channel_id="C123")


def test_send_posts_text_and_channel() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, text="ok")

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        WebhookNotifier(client).send("Happy birthday<@alice>", TARGET)

    assert len(requests) == 1
    assert requests[0].method == "POST"
    assert str(requests[0].url) == TARGET.webhook_url
    assert json.loads(requests[0].content) == {"text": "Happy birthday<@alice>", "channel": "C123"}


def test_send_raises_transport_error_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="no_service")

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(TransportError, match="404"):
            WebhookNotifier(client).send("hello", TARGET)


def test_send_raises_transport_error_on_network_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(TransportError) as exc_info:
            WebhookNotifier(client).send("hello", TARGET)

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_send_follows_redirects() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path == "/moved":
            return httpx.Response(200, text="ok")
        return httpx.Response(307, headers={"Location": "https://hooks.example.com/moved"})

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        WebhookNotifier(client).send("hello", TARGET)

    assert [str(request.url) for request in requests] == [
        TARGET.webhook_url,
        "https://hooks.example.com/moved",
    ]
    assert json.loads(requests[1].content) == {"text": "hello", "channel": "C123"}
