"""Email sender interface - Domain layer contract.

このインターフェースはメール送信機能の契約を定義します。
具体的な実装（Amazon SES, Console等）はInfrastructure層で提供されます。
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .email_message import EmailMessage


@runtime_checkable
class EmailSender(Protocol):
    """メール送信インターフェース（Protocol）.

    構造的部分型付けにより、メソッドシグネチャが一致すれば
    明示的な継承なしにこのプロトコルを実装したとみなされます。
    テストダブルや別プロバイダーへの差し替えはこの契約だけに依存します。
    """

    def send(self, message: EmailMessage) -> None:
        """メールを送信する.

        Args:
            message: 送信するメールメッセージ

        Raises:
            EmailServiceError: プロバイダーでの送信に失敗した場合
        """
        ...

    def validate_config(self) -> bool:
        """設定が有効かどうかを検証する.

        Returns:
            bool: 設定が有効な場合True、無効な場合False
        """
        ...
