"""Email sender infrastructure layer - Concrete implementations.

各実装はドメイン層のEmailSenderプロトコルを満たします。
"""

from .console_sender import ConsoleEmailSender
from .factory import EmailSenderFactory
from .ses_sender import DEFAULT_SOURCE_ADDRESS, SesEmailSender

__all__ = [
    "ConsoleEmailSender",
    "DEFAULT_SOURCE_ADDRESS",
    "EmailSenderFactory",
    "SesEmailSender",
]
