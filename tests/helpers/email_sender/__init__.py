"""Test doubles for the EmailSender protocol."""

from .recording_sender import RecordingEmailSender

__all__ = ["RecordingEmailSender"]
