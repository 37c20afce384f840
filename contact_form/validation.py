"""
Field rules for the consultation request form.

The same rule table backs both call sites:
  - `validate_fields` gives one message per field for inline form errors.
  - `validate_submission` gives the ordered list the API joins into its 400 reply.
"""

import re
from typing import Dict, List, Mapping, Optional

FIELDS = ("firstName", "lastName", "email", "phone", "relationship", "message")

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?[0-9\s().-]{7,20}")

NAME_MAX_LENGTH = 50
RELATIONSHIP_MAX_LENGTH = 100
MESSAGE_MAX_LENGTH = 2000

REQUIRED = "required"
TOO_LONG = "too_long"
INVALID = "invalid"

CLIENT_MESSAGES = {
    ("firstName", REQUIRED): "First name is required.",
    ("firstName", TOO_LONG): "First name must be 50 characters or less.",
    ("lastName", REQUIRED): "Last name is required.",
    ("lastName", TOO_LONG): "Last name must be 50 characters or less.",
    ("email", REQUIRED): "Email is required.",
    ("email", INVALID): "Please enter a valid email address.",
    ("phone", INVALID): "Please enter a valid phone number.",
    ("relationship", TOO_LONG): "Relationship must be 100 characters or less.",
    ("message", REQUIRED): "Message is required.",
    ("message", TOO_LONG): "Message must be 2000 characters or less.",
}

SERVER_MESSAGES = {
    "firstName": "First name is required (1-50 characters).",
    "lastName": "Last name is required (1-50 characters).",
    "email": "A valid email address is required.",
    "phone": "Phone number format is invalid.",
    "relationship": "Relationship must be 100 characters or less.",
    "message": "Message is required (1-2000 characters).",
}


def normalize_submission(data: Mapping[str, Optional[str]]) -> Dict[str, str]:
    """Return every form field trimmed, with missing values as empty strings."""
    normalized = {}
    for field in FIELDS:
        value = data.get(field)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise TypeError(f"{field} must be a string, got {type(value).__name__}")
        normalized[field] = value.strip()
    return normalized


def _required_text(value: str, max_length: int) -> Optional[str]:
    if not value:
        return REQUIRED
    if len(value) > max_length:
        return TOO_LONG
    return None


def _check_field(field: str, value: str) -> Optional[str]:
    if field in ("firstName", "lastName"):
        return _required_text(value, NAME_MAX_LENGTH)
    if field == "email":
        if not value:
            return REQUIRED
        return None if EMAIL_PATTERN.fullmatch(value) else INVALID
    if field == "phone":
        if value and not PHONE_PATTERN.fullmatch(value):
            return INVALID
        return None
    if field == "relationship":
        return TOO_LONG if len(value) > RELATIONSHIP_MAX_LENGTH else None
    if field == "message":
        return _required_text(value, MESSAGE_MAX_LENGTH)
    raise KeyError(field)


def check_submission(data: Mapping[str, Optional[str]]) -> List[tuple]:
    """Return (field, failure kind) pairs in form order."""
    normalized = normalize_submission(data)
    failures = []
    for field in FIELDS:
        kind = _check_field(field, normalized[field])
        if kind:
            failures.append((field, kind))
    return failures


def validate_fields(data: Mapping[str, Optional[str]]) -> Dict[str, str]:
    return {field: CLIENT_MESSAGES[(field, kind)] for field, kind in check_submission(data)}


def validate_submission(data: Mapping[str, Optional[str]]) -> List[str]:
    return [SERVER_MESSAGES[field] for field, _ in check_submission(data)]
