"""Email service - Application layer.

このモジュールはHTTPハンドラーやCLIから呼ばれる高レベルのメール送信サービスを提供します。
具体的な送信方法（Amazon SES, Console等）の詳細は EmailSender の実装に隠蔽されます。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from domain.email_sender import EmailMessage, EmailSender, EmailServiceError


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EmailSenderService:
    """メール送信アプリケーションサービス.

    Attributes:
        sender: メール送信実装（EmailSender）
    """

    sender: EmailSender

    def send_email(self, to: str, subject: str, body: str) -> None:
        """メールを送信する.

        Args:
            to: 送信先メールアドレス
            subject: メールの件名
            body: メールの本文（プレーンテキスト）

        Raises:
            ValueError: 入力がメールメッセージとして不正な場合
            EmailServiceError: プロバイダーでの送信に失敗した場合
        """
        message = EmailMessage(to=to, subject=subject, body=body)

        try:
            self.sender.send(message)
        except EmailServiceError as exc:
            logger.error(
                f"Failed to send email: {exc}",
                extra={
                    "event": "email.service.error",
                    "to": message.to,
                    "subject": message.subject,
                    "cause": repr(exc.__cause__) if exc.__cause__ else None,
                },
            )
            raise

        logger.info(
            "Email dispatched",
            extra={
                "event": "email.service.sent",
                "to": message.to,
                "subject": message.subject,
            },
        )

    def can_send_emails(self) -> bool:
        """Check if the configured sender is usable."""
        return self.sender.validate_config()
