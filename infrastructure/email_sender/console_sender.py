"""Console email sender implementation - Infrastructure layer.

メールを実際には送信せず、ログに出力します。
AWS の認証情報がない開発環境で MAIL_PROVIDER=console として使用します。
"""

from __future__ import annotations

import logging

from domain.email_sender.email_message import EmailMessage


logger = logging.getLogger(__name__)


class ConsoleEmailSender:
    """ログ出力によるメール送信実装.

    Attributes:
        source_address: ログに表示する送信元アドレス
        log_level: ログレベル（デフォルト: INFO）
    """

    def __init__(self, source_address: str | None = None, log_level: int = logging.INFO):
        self.source_address = source_address
        self.log_level = log_level

    def send(self, message: EmailMessage) -> None:
        """メールをログに出力する（常に成功）."""
        logger.log(
            self.log_level,
            self._format_message(message),
            extra={
                "event": "email.console.sent",
                "to": message.to,
                "subject": message.subject,
            },
        )

    def validate_config(self) -> bool:
        """コンソール送信は設定不要のため、常にTrueを返します."""
        return True

    def _format_message(self, message: EmailMessage) -> str:
        lines = [
            f"From: {self.source_address or '(default sender)'}",
            f"To: {message.to}",
            f"Subject: {message.subject}",
            "",
            message.body,
        ]
        return "\n".join(lines)
