from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from notification_dispatch.enums import Priority
from notification_dispatch.errors import NotificationValidationError
from notification_dispatch.models import (
    EmailData,
    PushData,
    SmsData,
    parse_notification,
)


class TestNotificationDefaults:
    def test_created_at_defaults_to_now(self):
        before = datetime.now(timezone.utc)
        sms = SmsData(sender="a", recipient="b", body="c", priority=Priority.LOW)
        after = datetime.now(timezone.utc)

        assert before <= sms.created_at <= after

    def test_explicit_created_at_kept(self):
        ts = datetime(2024, 1, 1, tzinfo=timezone.utc)
        push = PushData(sender="a", recipient="b", body="c", created_at=ts)

        assert push.created_at == ts

    def test_models_are_frozen(self, sample_email: EmailData):
        with pytest.raises(ValidationError):
            sample_email.created_at = datetime.now(timezone.utc)  # type: ignore[misc]

    def test_missing_recipient_rejected_at_construction(self):
        with pytest.raises(ValidationError):
            SmsData(sender="a", body="c")  # type: ignore[call-arg]

    def test_kind_discriminator(self, sample_email: EmailData, sample_sms: SmsData):
        assert sample_email.kind == "email"
        assert sample_sms.kind == "sms"
        assert PushData(sender="a", recipient="b", body="c").kind == "push"


class TestValidateAll:
    def test_valid_email_passes(self, sample_email: EmailData):
        sample_email.validate_all("email")

    def test_valid_sms_passes_without_subject(self, sample_sms: SmsData):
        sample_sms.validate_all("sms")

    @pytest.mark.parametrize("field", ["sender", "recipient", "body"])
    def test_blank_common_field_rejected(self, field: str):
        values = {"sender": "a", "recipient": "b", "body": "c", field: "   "}
        sms = SmsData(priority=Priority.HIGH, **values)

        with pytest.raises(NotificationValidationError) as exc_info:
            sms.validate_all("TwilioSmsProvider")

        assert exc_info.value.field == field
        assert exc_info.value.context == "TwilioSmsProvider"

    def test_missing_priority_rejected(self):
        push = PushData(sender="a", recipient="b", body="c")

        with pytest.raises(NotificationValidationError, match="priority"):
            push.validate_all()

    def test_email_requires_subject(self):
        email = EmailData(sender="a", recipient="b", body="c", priority=Priority.LOW)

        with pytest.raises(NotificationValidationError) as exc_info:
            email.validate_all("email")

        assert exc_info.value.field == "subject"

    def test_common_fields_checked_before_subject(self):
        email = EmailData(sender="", recipient="b", body="c", priority=Priority.LOW)

        with pytest.raises(NotificationValidationError) as exc_info:
            email.validate_all()

        assert exc_info.value.field == "sender"

    def test_validation_error_is_value_error(self):
        assert issubclass(NotificationValidationError, ValueError)


class TestParseNotification:
    def test_parses_email(self):
        note = parse_notification({
            "kind": "email",
            "sender": "a@example.com",
            "recipient": "b@example.com",
            "subject": "Hi",
            "body": "Hello",
            "priority": "urgent",
        })

        assert isinstance(note, EmailData)
        assert note.subject == "Hi"
        assert note.priority == Priority.URGENT

    def test_parses_push(self):
        note = parse_notification({
            "kind": "push",
            "sender": "app",
            "recipient": "device-1",
            "body": "ping",
        })

        assert isinstance(note, PushData)

    def test_missing_kind_raises(self):
        with pytest.raises(ValueError, match="Missing kind"):
            parse_notification({"sender": "a", "recipient": "b", "body": "c"})

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError, match="Unknown notification kind"):
            parse_notification({"kind": "fax", "sender": "a", "recipient": "b", "body": "c"})

    def test_invalid_priority_raises(self):
        with pytest.raises(ValidationError):
            parse_notification({
                "kind": "sms",
                "sender": "a",
                "recipient": "b",
                "body": "c",
                "priority": "whenever",
            })
