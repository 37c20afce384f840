import pytest
from fastapi.testclient import TestClient

from api import config
from api.main import app


class FakeTransport:
    """Stands in for `send_contact_email` and records every call."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return "msg_123"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def fake_transport(monkeypatch):
    transport = FakeTransport()
    monkeypatch.setattr("api.routers.contact_router.send_contact_email", transport)
    return transport


@pytest.fixture
def mail_config(monkeypatch):
    monkeypatch.setattr(config, "CONTACT_FROM_EMAIL", "Casa Colina Care <onboarding@resend.dev>")
    monkeypatch.setattr(config, "CONTACT_TO_EMAIL", "kriss@casacolinacare.com")
    monkeypatch.setattr(config, "RESEND_API_KEY", "re_test_key")
    monkeypatch.setattr(config, "RESEND_API_URL", "https://api.resend.com/emails")
    monkeypatch.setattr(config, "EMAIL_TRANSPORT", "resend")
    return config
