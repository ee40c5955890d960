"""Tests for EmailMessage value object."""

import dataclasses

import pytest
from domain.email_sender.email_message import EmailMessage


class TestEmailMessage:
    """Test EmailMessage value object."""

    def test_create_simple_message(self):
        """Test creating a simple email message."""
        message = EmailMessage(to="a@b.com", subject="Hi", body="Hello")

        assert message.to == "a@b.com"
        assert message.subject == "Hi"
        assert message.body == "Hello"

    def test_destinations_contains_only_recipient(self):
        """The destination list is exactly the supplied recipient."""
        message = EmailMessage(to="a@b.com", subject="Hi", body="Hello")

        assert message.destinations == ["a@b.com"]

    def test_message_is_immutable(self):
        """Test that message fields cannot be reassigned."""
        message = EmailMessage(to="a@b.com", subject="Hi", body="Hello")

        with pytest.raises(dataclasses.FrozenInstanceError):
            message.subject = "Changed"  # type: ignore[misc]

    def test_messages_with_same_values_are_equal(self):
        first = EmailMessage(to="a@b.com", subject="Hi", body="Hello")
        second = EmailMessage(to="a@b.com", subject="Hi", body="Hello")

        assert first == second

    @pytest.mark.parametrize("field", ["to", "subject", "body"])
    def test_empty_field_raises_error(self, field):
        """All three fields must be present."""
        values = {"to": "a@b.com", "subject": "Hi", "body": "Hello"}
        values[field] = ""

        with pytest.raises(ValueError, match=f"Field '{field}' is required"):
            EmailMessage(**values)

    def test_non_string_field_raises_error(self):
        with pytest.raises(ValueError, match="Field 'body' is required"):
            EmailMessage(to="a@b.com", subject="Hi", body=None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("address", ["invalid-email", "a@b"])
    def test_invalid_recipient_raises_error(self, address):
        """Test that invalid recipient addresses raise ValueError."""
        with pytest.raises(ValueError, match="Invalid recipient address"):
            EmailMessage(to=address, subject="Hi", body="Hello")

    def test_unicode_content_is_preserved(self):
        message = EmailMessage(to="a@b.com", subject="Olá", body="Ação concluída ✓")

        assert message.subject == "Olá"
        assert message.body == "Ação concluída ✓"
