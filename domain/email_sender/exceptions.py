"""メール送信ドメインの例外定義"""
from __future__ import annotations

SEND_FAILURE_MESSAGE = "Erro enquanto enviava o email"


class EmailServiceError(Exception):
    """プロバイダー固有の例外を隠蔽する、唯一のメール送信エラー.

    元の例外は ``raise ... from`` で ``__cause__`` に保持されます。
    """

    def __init__(self, message: str = SEND_FAILURE_MESSAGE):
        super().__init__(message)
        self.message = message
