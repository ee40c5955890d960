"""Access to the application services wired by :func:`emailservice.create_app`."""
from __future__ import annotations

from flask import current_app

from application.email_service import EmailSenderService

EMAIL_SERVICE_EXTENSION_KEY = "email_service"


def get_email_service() -> EmailSenderService:
    """Return the email service bound to the current application."""

    return current_app.extensions[EMAIL_SERVICE_EXTENSION_KEY]
