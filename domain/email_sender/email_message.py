"""Email message value object - Domain layer.

このモジュールはメールメッセージを表す値オブジェクトを提供します。
値オブジェクトは不変（immutable）であり、送信リクエスト1件分の情報だけを保持します。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class EmailMessage:
    """メールメッセージを表す値オブジェクト.

    宛先は常に1件、本文はプレーンテキストのみです。

    Attributes:
        to: 送信先メールアドレス
        subject: メールの件名
        body: メールの本文（プレーンテキスト）
    """

    to: str
    subject: str
    body: str

    # バリデーション用の最小メールアドレス長
    _MIN_EMAIL_LENGTH: ClassVar[int] = 3

    def __post_init__(self) -> None:
        """バリデーション実行."""
        self._validate_required_fields()
        if not self._is_valid_email(self.to):
            raise ValueError(f"Invalid recipient address: {self.to}")

    @property
    def destinations(self) -> list[str]:
        """プロバイダーへ渡す宛先リスト（常に受信者1件のみ）."""
        return [self.to]

    def _validate_required_fields(self) -> None:
        """必須フィールドのバリデーション."""
        for name in ("to", "subject", "body"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"Field '{name}' is required")

    @staticmethod
    def _is_valid_email(email: str) -> bool:
        """メールアドレスの基本的な検証.

        Args:
            email: 検証するメールアドレス

        Returns:
            bool: 有効な場合True
        """
        # 簡易的な検証（@が含まれていることのみ）。最終的な判定はプロバイダー側で行われる
        return "@" in email and len(email) > EmailMessage._MIN_EMAIL_LENGTH
