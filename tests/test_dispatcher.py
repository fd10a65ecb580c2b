import json

import httpx
import pytest
import respx
from httpx import Response

from drone_slack.channels import SlackAttachment, SlackPayload
from drone_slack.channels.dispatcher import send
from drone_slack.errors import DispatchError
from tests.conftest import WEBHOOK_URL


@pytest.fixture
def payload() -> SlackPayload:
    return SlackPayload(
        attachments=[SlackAttachment(fallback="success", color="good", text="*success*")],
        channel="#dev",
    )


@respx.mock
def test_send_posts_json(payload) -> None:
    route = respx.post(WEBHOOK_URL).mock(return_value=Response(200, text="ok"))

    send(WEBHOOK_URL, payload)

    assert route.call_count == 1
    body = json.loads(route.calls.last.request.content)
    assert body["channel"] == "#dev"
    assert body["attachments"][0]["mrkdwn_in"] == ["text", "fallback"]


@respx.mock
def test_send_with_client(payload) -> None:
    route = respx.post(WEBHOOK_URL).mock(return_value=Response(200, text="ok"))

    with httpx.Client() as client:
        send(WEBHOOK_URL, payload, client=client)

    assert route.called


@respx.mock
def test_non_success_status(payload) -> None:
    respx.post(WEBHOOK_URL).mock(return_value=Response(404, text="no_service"))

    with pytest.raises(DispatchError) as exc_info:
        send(WEBHOOK_URL, payload)

    assert exc_info.value.status_code == 404
    assert "no_service" in str(exc_info.value)


@respx.mock
def test_transport_error(payload) -> None:
    route = respx.post(WEBHOOK_URL).mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(DispatchError) as exc_info:
        send(WEBHOOK_URL, payload)

    assert route.call_count == 1
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_missing_webhook_url(payload) -> None:
    with pytest.raises(DispatchError):
        send(None, payload)


def test_malformed_webhook_url(payload) -> None:
    with pytest.raises(DispatchError) as exc_info:
        send("http://[::1", payload)
    assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)
