"""
Client-side state for the consultation request form.

`ContactForm` holds the field values, per-field errors and the submission
status, and talks to `POST /api/contact` through a requests-style session
(anything with `post(url, json=...)` returning a response that has
`status_code` and `json()`).

Status lifecycle:

    idle -> loading -> success -> idle (reset)
                    -> error -> loading (retry)
"""

import enum
import logging
from typing import Dict, Optional

import requests

from api import config
from contact_form.validation import FIELDS, validate_fields

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again or call us directly."
SUCCESS_MESSAGE = "Thank you! We'll be in touch soon."
SUBMIT_LABEL = "Send Consultation Request"
LOADING_LABEL = "Sending..."


class FormStatus(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


TRANSITIONS = {
    FormStatus.IDLE: {FormStatus.LOADING},
    FormStatus.LOADING: {FormStatus.SUCCESS, FormStatus.ERROR},
    FormStatus.SUCCESS: {FormStatus.IDLE},
    FormStatus.ERROR: {FormStatus.LOADING},
}


class FormStateError(Exception):
    pass


def empty_form() -> Dict[str, str]:
    return {field: "" for field in FIELDS}


class ContactForm:
    def __init__(self, session=None, endpoint_url: Optional[str] = None):
        self.session = session or requests.Session()
        self.endpoint_url = endpoint_url or config.CONTACT_ENDPOINT_URL
        self.data = empty_form()
        self.errors: Dict[str, str] = {}
        self.status = FormStatus.IDLE
        self.error_message = ""

    @property
    def is_loading(self) -> bool:
        return self.status is FormStatus.LOADING

    @property
    def controls_disabled(self) -> bool:
        return self.is_loading

    @property
    def submit_label(self) -> str:
        return LOADING_LABEL if self.is_loading else SUBMIT_LABEL

    @property
    def success_message(self) -> str:
        return SUCCESS_MESSAGE if self.status is FormStatus.SUCCESS else ""

    def _transition(self, new_status: FormStatus):
        if new_status not in TRANSITIONS[self.status]:
            raise FormStateError(f"Cannot move from {self.status.value} to {new_status.value}")
        self.status = new_status

    def change(self, name: str, value: str):
        if name not in self.data:
            raise KeyError(name)
        self.data[name] = value
        # Clear only the edited field's error; full validation waits for submit.
        self.errors.pop(name, None)

    def submit(self) -> FormStatus:
        """Validate locally, then post the form once. Returns the resulting status."""
        if self.is_loading:
            return self.status
        if self.status is FormStatus.SUCCESS:
            raise FormStateError("Form already sent; reset it before submitting again")

        errors = validate_fields(self.data)
        if errors:
            self.errors = errors
            return self.status

        self._transition(FormStatus.LOADING)
        self.errors = {}
        self.error_message = ""

        try:
            response = self.session.post(self.endpoint_url, json=dict(self.data))
            body = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Contact form request failed: %s", exc)
            self._fail(GENERIC_ERROR_MESSAGE)
            return self.status

        if not isinstance(body, dict):
            body = {}

        if 200 <= response.status_code < 300 and body.get("success"):
            self._transition(FormStatus.SUCCESS)
            self.data = empty_form()
        else:
            self._fail(body.get("message") or GENERIC_ERROR_MESSAGE)
        return self.status

    def _fail(self, message: str):
        self._transition(FormStatus.ERROR)
        self.error_message = message

    def reset(self):
        """'Send another message': back to an empty idle form."""
        self._transition(FormStatus.IDLE)
        self.data = empty_form()
        self.errors = {}
        self.error_message = ""
