"""Amazon SES email sender implementation - Infrastructure layer.

このモジュールは Amazon Simple Email Service (SES) を使用したメール送信の実装を提供します。
boto3 の SES クライアントで SendEmail API を呼び出し、プロバイダー固有の例外を
ドメインの EmailServiceError に変換します。

Note:
    - 送信元アドレス（Source）は SES で検証済みである必要があります
    - サンドボックス環境では受信者アドレスも検証済みである必要があります
    - 本文はプレーンテキストのみをサポートします（HTMLは送信しません）
"""

from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from domain.email_sender.email_message import EmailMessage
from domain.email_sender.exceptions import EmailServiceError


logger = logging.getLogger(__name__)

DEFAULT_SOURCE_ADDRESS = "no-reply@emailservice.example.com"
CHARSET = "UTF-8"


class SesEmailSender:
    """Amazon SES を使用したメール送信実装.

    Attributes:
        client: boto3 の SES クライアント（スレッドセーフで、プロセス内で共有される）
        source_address: 送信元アドレス（リクエストごとには変更できない）
    """

    def __init__(self, client: Any, source_address: str = DEFAULT_SOURCE_ADDRESS):
        self.client = client
        self.source_address = source_address

    def send(self, message: EmailMessage) -> None:
        """SES でメールを送信する.

        Args:
            message: 送信するメールメッセージ

        Raises:
            EmailServiceError: 認証・スロットリング・未検証アドレス・通信障害など、
                SES 呼び出しが失敗した場合（元の例外は ``__cause__`` に保持）
        """
        request = self.build_request(message)

        try:
            response = self.client.send_email(**request)
        except (ClientError, BotoCoreError) as exc:
            logger.error(
                f"Failed to send email via SES: {exc}",
                extra={
                    "event": "email.ses.error",
                    "to": message.to,
                    "subject": message.subject,
                    "error_code": _error_code(exc),
                },
            )
            raise EmailServiceError() from exc

        logger.info(
            "Email sent successfully via SES",
            extra={
                "event": "email.ses.sent",
                "to": message.to,
                "subject": message.subject,
                "message_id": response.get("MessageId") if isinstance(response, dict) else None,
            },
        )

    def build_request(self, message: EmailMessage) -> dict[str, Any]:
        """ドメインメッセージを SES SendEmail のパラメータに変換する."""
        return {
            "Source": self.source_address,
            "Destination": {"ToAddresses": message.destinations},
            "Message": {
                "Subject": {"Data": message.subject, "Charset": CHARSET},
                "Body": {"Text": {"Data": message.body, "Charset": CHARSET}},
            },
        }

    def validate_config(self) -> bool:
        """クライアントと送信元アドレスが設定されているかを検証する."""
        if self.client is None:
            logger.warning("SES client is not configured")
            return False
        if not self.source_address:
            logger.warning("SES source address is not configured")
            return False
        return True


def _error_code(exc: Exception) -> str | None:
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Code")
    return type(exc).__name__
