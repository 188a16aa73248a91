from __future__ import annotations

import json
from datetime import datetime, timezone

import httpx
import pytest
from pydantic import ValidationError

from portfolio_site.config import CONTACT_SUCCESS
from widgets.analytics import Analytics
from widgets.contact_form import ContactForm, contact_payload, iso_timestamp, submit_contact, validate_contact

VALID = {"name": "Jo", "email": "a@b.com", "message": "hello there!!"}
ENDPOINT = "http://contact.test/api/contact"


def test_name_of_one_char_is_too_short() -> None:
    with pytest.raises(ValidationError) as info:
        ContactForm(**{**VALID, "name": "A"})
    err = info.value.errors()[0]
    assert err["loc"] == ("name",)
    assert err["type"] == "too_short"
    assert err["msg"] == "Name must be at least 2 characters."


def test_name_of_two_chars_is_accepted() -> None:
    form, errors = validate_contact({**VALID, "name": "Al"})
    assert errors == {}
    assert form is not None and form.name == "Al"


def test_email_format() -> None:
    form, errors = validate_contact({**VALID, "email": "not-an-email"})
    assert form is None
    assert errors == {"email": "Please enter a valid email address."}

    form, errors = validate_contact({**VALID, "email": "a@b.co"})
    assert errors == {}


@pytest.mark.parametrize("email", [
    "Jo Smith <a@b.com>",
    "<a@b.com>",
    "a@b.com ",
    "jo smith@b.com",
])
def test_email_must_be_a_bare_address(email) -> None:
    form, errors = validate_contact({**VALID, "email": email})
    assert form is None
    assert errors == {"email": "Please enter a valid email address."}


def test_email_is_kept_as_typed() -> None:
    form, _ = validate_contact({**VALID, "email": "Jo.Smith@Example.com"})
    assert form is not None and form.email == "Jo.Smith@Example.com"


def test_message_length() -> None:
    _, errors = validate_contact({**VALID, "message": "too short"})
    assert errors == {"message": "Message must be at least 10 characters."}
    _, errors = validate_contact({**VALID, "message": "ten chars!"})
    assert errors == {}


def test_missing_fields_report_every_field() -> None:
    form, errors = validate_contact({})
    assert form is None
    assert set(errors) == {"name", "email", "message"}


def test_timestamp_is_iso_utc_with_millis() -> None:
    now = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
    assert iso_timestamp(now) == "2024-01-02T03:04:05.678Z"

    payload = contact_payload(ContactForm(**VALID), now)
    assert payload == {**VALID, "timestamp": "2024-01-02T03:04:05.678Z"}


class TagRecorder:
    def __init__(self) -> None:
        self.calls: list = []

    def __call__(self, command, target, params) -> None:
        self.calls.append((command, target, params))

    @property
    def actions(self) -> list:
        return [target for command, target, _ in self.calls if command == "event"]


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_submit_posts_json_payload() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, str(request.url), json.loads(request.content)))
        return httpx.Response(200, json={"message": "Message sent successfully"})

    tag = TagRecorder()
    result = submit_contact(ContactForm(**VALID), ENDPOINT, client=_client(handler), analytics=Analytics(tag=tag))

    assert result.delivered is True
    assert result.message == CONTACT_SUCCESS
    method, url, body = seen[0]
    assert (method, url) == ("POST", ENDPOINT)
    assert {k: body[k] for k in VALID} == VALID
    assert body["timestamp"].endswith("Z")
    assert tag.actions == ["contact_form_submit"]


def test_server_error_is_masked_as_success() -> None:
    tag = TagRecorder()
    result = submit_contact(
        ContactForm(**VALID), ENDPOINT,
        client=_client(lambda request: httpx.Response(500, json={"error": "Internal server error"})),
        analytics=Analytics(tag=tag),
    )
    assert result.delivered is False
    assert result.message == CONTACT_SUCCESS
    assert tag.actions == ["contact_form_submit", "contact_form_error"]


def test_transport_error_is_masked_as_success(caplog) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = submit_contact(ContactForm(**VALID), ENDPOINT, client=_client(handler))
    assert result.delivered is False
    assert result.message == CONTACT_SUCCESS
    assert "Error sending message" in caplog.text
