"""Tests for processors."""

from log.processors import PsrPlaceholderProcessor, ReferenceIdProcessor, RequestIdProcessor


def make_event(message="hello", extra=None):
    return {"priority": 6, "priority_name": "INFO", "message": message, "extra": extra or {}}


class TestReferenceIdProcessor:
    def test_configured_reference_id(self):
        """The configured id is added to extra."""
        event = ReferenceIdProcessor({"reference_id": "ref-1"}).process(make_event())

        assert event["extra"]["referenceId"] == "ref-1"

    def test_generated_reference_id_is_stable(self):
        """A generated id is reused for every event of one processor."""
        processor = ReferenceIdProcessor()

        first = processor.process(make_event())
        second = processor.process(make_event())

        assert first["extra"]["referenceId"] == second["extra"]["referenceId"]
        assert first["extra"]["referenceId"] != ReferenceIdProcessor().reference_id

    def test_input_event_not_modified(self):
        """Processing returns a new event."""
        event = make_event(extra={"user": "bob"})

        ReferenceIdProcessor({"reference_id": "ref-1"}).process(event)

        assert event["extra"] == {"user": "bob"}


class TestRequestIdProcessor:
    def test_adds_request_id(self):
        """A request id is added when missing."""
        event = RequestIdProcessor().process(make_event())

        assert len(event["extra"]["requestId"]) == 32

    def test_existing_request_id_kept(self):
        """An existing request id wins."""
        event = RequestIdProcessor().process(make_event(extra={"requestId": "abc"}))

        assert event["extra"]["requestId"] == "abc"


class TestPsrPlaceholderProcessor:
    def test_interpolates_known_keys(self):
        """Placeholders are replaced from extra."""
        event = PsrPlaceholderProcessor().process(
            make_event("user {user} has {count} items", {"user": "bob", "count": 3})
        )

        assert event["message"] == "user bob has 3 items"

    def test_unknown_placeholders_left(self):
        """Placeholders without a value are left as written."""
        event = PsrPlaceholderProcessor().process(make_event("{user} {missing}", {"user": "bob"}))

        assert event["message"] == "bob {missing}"

    def test_without_extra(self):
        """Events without extra pass through."""
        event = make_event("{user}")

        assert PsrPlaceholderProcessor().process(event) is event
