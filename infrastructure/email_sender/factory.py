"""Email sender factory - Infrastructure layer.

このモジュールは設定に基づいて適切なメール送信実装を生成するファクトリを提供します。
アプリケーションの起動時に一度だけ呼ばれ、生成した送信実装をサービスに明示的に渡します。
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import boto3

from core.settings import ApplicationSettings, settings as default_settings
from domain.email_sender.sender_interface import EmailSender
from .console_sender import ConsoleEmailSender
from .ses_sender import DEFAULT_SOURCE_ADDRESS, SesEmailSender


logger = logging.getLogger(__name__)


class EmailSenderFactory:
    """メール送信実装のファクトリクラス.

    設定に基づいて適切なEmailSender実装を生成します。
    """

    # サポートされているメールプロバイダー
    PROVIDER_SES = "ses"
    PROVIDER_CONSOLE = "console"

    # デフォルトプロバイダー
    DEFAULT_PROVIDER = PROVIDER_SES

    @staticmethod
    def create(
        provider: Optional[str] = None,
        client: Any = None,
        source_address: Optional[str] = None,
        app_settings: Optional[ApplicationSettings] = None,
    ) -> EmailSender:
        """設定に基づいてメール送信実装を生成する.

        Args:
            provider: メールプロバイダー名（ses, console）
                     Noneの場合は設定またはデフォルトから取得
            client: SESクライアント（省略時は設定から生成）
            source_address: 送信元アドレス（省略時は設定から取得）
            app_settings: 参照する設定（省略時はグローバル設定）

        Returns:
            EmailSender: メール送信実装

        Raises:
            ValueError: 未対応のプロバイダーが指定された場合
        """
        cfg = app_settings or default_settings

        if provider is None:
            provider = cfg.mail_provider
        provider = provider.lower().strip()

        if source_address is None:
            source_address = cfg.mail_source_address or DEFAULT_SOURCE_ADDRESS

        logger.info(
            f"Creating email sender with provider: {provider}",
            extra={"event": "email.factory.create", "provider": provider},
        )

        if provider == EmailSenderFactory.PROVIDER_SES:
            if client is None:
                client = EmailSenderFactory.create_ses_client(cfg)
            return SesEmailSender(client=client, source_address=source_address)

        if provider == EmailSenderFactory.PROVIDER_CONSOLE:
            return ConsoleEmailSender(source_address=source_address)

        raise ValueError(
            f"Unsupported email provider: {provider}. "
            f"Supported providers: {EmailSenderFactory.PROVIDER_SES}, "
            f"{EmailSenderFactory.PROVIDER_CONSOLE}"
        )

    @staticmethod
    def create_ses_client(cfg: ApplicationSettings) -> Any:
        """設定から boto3 の SES クライアントを生成する.

        認証情報が設定されていない場合は boto3 の既定の認証チェーン
        （環境変数、共有設定ファイル、IAMロール）に委ねます。
        """
        options: dict[str, Any] = {"region_name": cfg.aws_region}
        if cfg.aws_access_key_id and cfg.aws_secret_access_key:
            options["aws_access_key_id"] = cfg.aws_access_key_id
            options["aws_secret_access_key"] = cfg.aws_secret_access_key
        if cfg.aws_ses_endpoint_url:
            options["endpoint_url"] = cfg.aws_ses_endpoint_url

        return boto3.client("ses", **options)
