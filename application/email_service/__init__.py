"""Email service application layer."""

from .email_service import EmailSenderService

__all__ = ["EmailSenderService"]
