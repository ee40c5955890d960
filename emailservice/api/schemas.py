"""Marshmallow schemas for the email endpoint."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class EmailRequestSchema(Schema):
    """Inbound send request. Unknown keys are ignored."""

    class Meta:
        unknown = EXCLUDE

    to = fields.String(
        required=True,
        validate=validate.Length(min=1),
        metadata={"description": "Recipient address", "example": "a@b.com"},
    )
    subject = fields.String(
        required=True,
        validate=validate.Length(min=1),
        metadata={"description": "Subject line", "example": "Hi"},
    )
    body = fields.String(
        required=True,
        validate=validate.Length(min=1),
        metadata={"description": "Plain-text body", "example": "Hello"},
    )
