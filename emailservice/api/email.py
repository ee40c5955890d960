"""メール送信APIエンドポイント。"""
from __future__ import annotations

from flask import Response, current_app, jsonify

from domain.email_sender import EmailServiceError

from . import bp
from .schemas import EmailRequestSchema
from ..services import get_email_service

SUCCESS_MESSAGE = "Email enviado com sucesso!"
FAILURE_MESSAGE = "Erro enquanto enviava o email."


def _plain_text(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype="text/plain")


@bp.post("/email")
@bp.doc(
    responses={
        200: {
            "description": "The provider accepted the message.",
            "content": {"text/plain": {"schema": {"type": "string", "example": SUCCESS_MESSAGE}}},
        },
        400: {"description": "The recipient address is not a valid email address."},
        500: {
            "description": "The provider rejected the message or could not be reached.",
            "content": {"text/plain": {"schema": {"type": "string", "example": FAILURE_MESSAGE}}},
        },
    },
)
@bp.arguments(EmailRequestSchema)
def send_email(data: dict) -> Response:
    """受信者・件名・本文を受け取り、メール送信プロバイダーへ転送する。"""

    service = get_email_service()
    try:
        service.send_email(data["to"], data["subject"], data["body"])
    except ValueError as exc:
        current_app.logger.info(
            "Rejected email request",
            extra={"event": "api.email.invalid", "reason": str(exc)},
        )
        return jsonify({"error": "invalid_request", "message": str(exc)}), 400
    except EmailServiceError:
        # 原因の種類は呼び出し元に区別して返さない
        return _plain_text(FAILURE_MESSAGE, 500)

    return _plain_text(SUCCESS_MESSAGE, 200)
