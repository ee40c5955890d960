"""Email sender domain layer.

ドメイン層は送信プロバイダーに依存せず、値オブジェクト・契約・例外のみを定義します。
"""

from .email_message import EmailMessage
from .exceptions import EmailServiceError
from .sender_interface import EmailSender

__all__ = ["EmailMessage", "EmailSender", "EmailServiceError"]
