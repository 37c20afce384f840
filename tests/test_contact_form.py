import pytest
import requests

from contact_form.controller import ContactForm, FormStateError, FormStatus

GENERIC = "Something went wrong. Please try again or call us directly."


class FakeResponse:
    def __init__(self, status_code, payload=None):
        self.status_code = status_code
        self.payload = payload

    def json(self):
        if self.payload is None:
            raise ValueError("Expecting value")
        return self.payload


class FakeSession:
    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def post(self, url, json=None):
        self.calls.append((url, json))
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def fill(form, **overrides):
    values = {"firstName": "Jane", "lastName": "Doe", "email": "jane@example.com", "message": "Hello"}
    values.update(overrides)
    for name, value in values.items():
        form.change(name, value)


def test_starts_idle_and_empty():
    form = ContactForm(session=FakeSession())
    assert form.status is FormStatus.IDLE
    assert set(form.data.values()) == {""}
    assert form.submit_label == "Send Consultation Request"
    assert not form.controls_disabled


def test_invalid_email_never_hits_the_network():
    session = FakeSession()
    form = ContactForm(session=session, endpoint_url="/api/contact")
    fill(form, email="not-an-email")

    assert form.submit() is FormStatus.IDLE
    assert session.calls == []
    assert form.errors == {"email": "Please enter a valid email address."}


def test_change_clears_only_that_fields_error():
    form = ContactForm(session=FakeSession())
    form.submit()
    assert set(form.errors) == {"firstName", "lastName", "email", "message"}

    form.change("email", "still bad")
    assert "email" not in form.errors
    assert set(form.errors) == {"firstName", "lastName", "message"}


def test_change_rejects_unknown_field():
    form = ContactForm(session=FakeSession())
    with pytest.raises(KeyError):
        form.change("favouriteColour", "teal")


def test_successful_submit_clears_form():
    session = FakeSession(FakeResponse(200, {"success": True, "message": "Thank you! We'll be in touch soon."}))
    form = ContactForm(session=session, endpoint_url="/api/contact")
    fill(form, phone="808-200-1840")

    assert form.submit() is FormStatus.SUCCESS
    assert session.calls == [
        (
            "/api/contact",
            {
                "firstName": "Jane",
                "lastName": "Doe",
                "email": "jane@example.com",
                "phone": "808-200-1840",
                "relationship": "",
                "message": "Hello",
            },
        )
    ]
    assert set(form.data.values()) == {""}
    assert form.success_message == "Thank you! We'll be in touch soon."


def test_server_message_is_shown_verbatim():
    session = FakeSession(FakeResponse(400, {"success": False, "message": "A valid email address is required."}))
    form = ContactForm(session=session)
    fill(form)

    assert form.submit() is FormStatus.ERROR
    assert form.error_message == "A valid email address is required."
    assert form.data["firstName"] == "Jane"


def test_failure_without_message_uses_fallback():
    form = ContactForm(session=FakeSession(FakeResponse(500, {"success": False})))
    fill(form)

    form.submit()
    assert form.status is FormStatus.ERROR
    assert form.error_message == GENERIC


def test_ok_status_without_success_flag_is_an_error():
    form = ContactForm(session=FakeSession(FakeResponse(200, {"success": False, "message": "Nope"})))
    fill(form)

    assert form.submit() is FormStatus.ERROR
    assert form.error_message == "Nope"


@pytest.mark.parametrize(
    "result",
    [requests.ConnectionError("offline"), requests.Timeout("slow"), FakeResponse(502)],
)
def test_network_failure_or_unreadable_reply_uses_fallback(result):
    form = ContactForm(session=FakeSession(result))
    fill(form)

    assert form.submit() is FormStatus.ERROR
    assert form.error_message == GENERIC


def test_retry_from_error_state():
    session = FakeSession(
        requests.ConnectionError("offline"),
        FakeResponse(200, {"success": True, "message": "ok"}),
    )
    form = ContactForm(session=session)
    fill(form)

    assert form.submit() is FormStatus.ERROR
    assert form.submit() is FormStatus.SUCCESS
    assert form.error_message == ""
    assert len(session.calls) == 2


def test_one_request_per_submit_while_loading():
    form = ContactForm(session=FakeSession())
    fill(form)
    form.status = FormStatus.LOADING

    assert form.controls_disabled
    assert form.submit_label == "Sending..."
    assert form.submit() is FormStatus.LOADING
    assert form.session.calls == []


def test_reset_only_after_success():
    form = ContactForm(session=FakeSession(FakeResponse(200, {"success": True})))
    with pytest.raises(FormStateError):
        form.reset()

    fill(form)
    form.submit()
    with pytest.raises(FormStateError):
        form.submit()

    form.reset()
    assert form.status is FormStatus.IDLE
    assert form.errors == {}
    assert set(form.data.values()) == {""}


def test_round_trip_against_the_api(client, fake_transport, mail_config):
    form = ContactForm(session=client, endpoint_url="/api/contact")
    fill(form, relationship="Daughter")

    assert form.submit() is FormStatus.SUCCESS
    assert len(fake_transport.calls) == 1
    assert "Relationship to Resident" in fake_transport.calls[0]["html"]


def test_client_side_rejection_leaves_api_untouched(client, fake_transport):
    form = ContactForm(session=client, endpoint_url="/api/contact")
    fill(form, email="jane-at-example")

    form.submit()
    assert form.status is FormStatus.IDLE
    assert fake_transport.calls == []
