# widgets/contact_form.py — schema validation + POST to the contact endpoint
# ---------------------------------------------------------------------------
# Failed deliveries are logged but the visitor still sees the success
# message; the endpoint only logs submissions for now.
# ---------------------------------------------------------------------------

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Tuple

import httpx
import streamlit as st
from pydantic import BaseModel, ValidationError, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from portfolio_site.config import CONTACT_ENDPOINT, CONTACT_SUCCESS, CONTACT_TIMEOUT
from widgets.analytics import Analytics

logger = logging.getLogger(__name__)

FIELDS = ("name", "email", "message")


class ContactForm(BaseModel):
    name: str
    email: str
    message: str

    @field_validator("name")
    @classmethod
    def _name_length(cls, v: str) -> str:
        if len(v) < 2:
            raise PydanticCustomError("too_short", "Name must be at least 2 characters.")
        return v

    @field_validator("email")
    @classmethod
    def _email_format(cls, v: str) -> str:
        invalid = PydanticCustomError("invalid_email", "Please enter a valid email address.")
        # bare address only: validate_email also takes the "Name <addr>" form
        if "<" in v or ">" in v or any(ch.isspace() for ch in v):
            raise invalid
        try:
            _, addr = validate_email(v)
        except PydanticCustomError:
            raise invalid from None
        if addr.lower() != v.lower():
            raise invalid
        return v

    @field_validator("message")
    @classmethod
    def _message_length(cls, v: str) -> str:
        if len(v) < 10:
            raise PydanticCustomError("too_short", "Message must be at least 10 characters.")
        return v


def validate_contact(data: Mapping[str, Any]) -> Tuple[Optional[ContactForm], Dict[str, str]]:
    """Return (form, {}) when valid, else (None, {field: first message})."""
    try:
        form = ContactForm(**{f: data.get(f) or "" for f in FIELDS})
    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else "form"
            errors.setdefault(field, err["msg"])
        return None, errors
    return form, {}


def iso_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def contact_payload(form: ContactForm, now: Optional[datetime] = None) -> Dict[str, str]:
    return {
        "name": form.name,
        "email": form.email,
        "message": form.message,
        "timestamp": iso_timestamp(now),
    }


@dataclass
class SubmissionResult:
    delivered: bool
    message: str


def submit_contact(form: ContactForm, endpoint: str = CONTACT_ENDPOINT,
                   client: Optional[httpx.Client] = None,
                   analytics: Optional[Analytics] = None,
                   timeout: float = CONTACT_TIMEOUT) -> SubmissionResult:
    if analytics is not None:
        analytics.track_contact_form("submit")
    payload = contact_payload(form)
    try:
        if client is None:
            with httpx.Client(timeout=timeout) as c:
                response = c.post(endpoint, json=payload)
        else:
            response = client.post(endpoint, json=payload)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.error("Error sending message: %s", exc)
        if analytics is not None:
            analytics.track_contact_form("error")
        return SubmissionResult(delivered=False, message=CONTACT_SUCCESS)
    logger.info("Contact message delivered (%s)", response.status_code)
    return SubmissionResult(delivered=True, message=CONTACT_SUCCESS)


# -----------------------------
# Streamlit form
# -----------------------------
FORM_KEYS = {"name": "contact_name", "email": "contact_email", "message": "contact_message"}
ERRORS_KEY = "contact_errors"
FLASH_KEY = "contact_flash"


def _on_submit(endpoint: str, analytics: Optional[Analytics]):
    data = {field: st.session_state.get(key, "") for field, key in FORM_KEYS.items()}
    form, errors = validate_contact(data)
    st.session_state[ERRORS_KEY] = errors
    if form is None:
        return
    result = submit_contact(form, endpoint, analytics=analytics)
    for key in FORM_KEYS.values():
        st.session_state[key] = ""
    st.session_state[FLASH_KEY] = result.message


def _field_error(errors: Dict[str, str], field: str):
    if field in errors:
        st.caption(f":red[{errors[field]}]")


def contact_form(endpoint: str = CONTACT_ENDPOINT, analytics: Optional[Analytics] = None):
    errors = st.session_state.get(ERRORS_KEY, {})
    flash = st.session_state.pop(FLASH_KEY, None)
    if flash:
        st.success(flash)

    with st.form("contact_form"):
        st.text_input("Name", key=FORM_KEYS["name"], placeholder="Your name")
        _field_error(errors, "name")
        st.text_input("Email", key=FORM_KEYS["email"], placeholder="your.email@example.com")
        _field_error(errors, "email")
        st.text_area("Message", key=FORM_KEYS["message"], placeholder="Your message...", height=150)
        _field_error(errors, "message")
        st.form_submit_button(
            "Send Message", type="primary", use_container_width=True,
            on_click=_on_submit, args=(endpoint, analytics),
        )
