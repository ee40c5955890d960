# emailservice/__init__.py
import json
import time
from collections.abc import Mapping, Sequence
from uuid import uuid4

from flask import Flask, g, request
from flask_smorest import Api

from application.email_service import EmailSenderService
from core.logging_config import configure_app_logging
from .services import EMAIL_SERVICE_EXTENSION_KEY


_SENSITIVE_KEYWORDS = {
    "password",
    "passwd",
    "secret",
    "token",
    "access_token",
    "refresh_token",
    "api_key",
    "access_key",
}


_MAX_POST_PARAM_STRING_LENGTH = 120


def _is_sensitive_key(key):
    if not isinstance(key, str):
        return False
    key_lower = key.lower()
    return any(keyword in key_lower for keyword in _SENSITIVE_KEYWORDS)


def _mask_sensitive_data(data):
    """再帰的に辞書やリスト内の機密情報をマスクする。"""

    if isinstance(data, Mapping):
        masked = {}
        for key, value in data.items():
            if _is_sensitive_key(key):
                masked[key] = "***"
            else:
                masked[key] = _mask_sensitive_data(value)
        return masked
    if isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        return [_mask_sensitive_data(item) for item in data]
    return data


def _truncate_long_parameter_values(data, *, max_length=_MAX_POST_PARAM_STRING_LENGTH):
    """POSTパラメータ中の長い文字列を切り詰める（メール本文など）。"""

    if isinstance(data, str):
        if len(data) <= max_length:
            return data
        return f"{data[:max_length]}… ({len(data)} chars)"
    if isinstance(data, Mapping):
        return {
            key: _truncate_long_parameter_values(value, max_length=max_length)
            for key, value in data.items()
        }
    if isinstance(data, Sequence) and not isinstance(data, (bytes, bytearray)):
        return [_truncate_long_parameter_values(item, max_length=max_length) for item in data]
    return data


def _build_email_service() -> EmailSenderService:
    """設定からプロバイダークライアント → 送信実装 → サービスを組み立てる。"""

    from infrastructure.email_sender import EmailSenderFactory

    return EmailSenderService(sender=EmailSenderFactory.create())


def create_app(config_object=None, email_service: EmailSenderService | None = None):
    """アプリケーションファクトリ

    Args:
        config_object: ``Config`` の代わりに読み込む設定オブジェクト
        email_service: 明示的に渡すメール送信サービス（省略時は設定から構築）
    """
    from .config import Config

    app = Flask(__name__)
    app.config.from_object(Config)
    if config_object is not None:
        app.config.from_object(config_object)

    configure_app_logging(app)

    smorest_api = Api(app)

    with app.app_context():
        # MAIL_* / AWS_* は app.config を優先して参照するためコンテキスト内で組み立てる
        if email_service is None:
            email_service = _build_email_service()
    app.extensions[EMAIL_SERVICE_EXTENSION_KEY] = email_service

    from .error_handlers import register_error_handlers
    register_error_handlers(app, mask=_mask_sensitive_data)

    # Blueprint 登録
    from .api import bp as api_bp
    smorest_api.register_blueprint(api_bp, url_prefix="/api")

    # 認証なしの健康チェック用Blueprint
    from .health import health_bp
    app.register_blueprint(health_bp)

    # CLI コマンド登録
    register_cli_commands(app)

    @app.before_request
    def start_timer():
        g.start_time = time.perf_counter()

    @app.before_request
    def log_api_request():
        if request.path.startswith("/api"):
            req_id = str(uuid4())
            g.request_id = req_id
            input_json = request.get_json(silent=True)

            log_dict = {
                "method": request.method,
            }
            if input_json is not None:
                log_dict["json"] = _mask_sensitive_data(
                    _truncate_long_parameter_values(input_json)
                )
            app.logger.info(
                json.dumps(log_dict, ensure_ascii=False, default=str),
                extra={
                    "event": "api.input",
                    "request_id": req_id,
                    "path": request.path,
                },
            )

    @app.after_request
    def log_api_response(response):
        if request.path.startswith("/api"):
            log_payload = {"status": response.status_code}
            if response.mimetype == "application/json":
                log_payload["json"] = _mask_sensitive_data(response.get_json(silent=True))
            elif response.mimetype == "text/plain" and not response.direct_passthrough:
                log_payload["text"] = _truncate_long_parameter_values(
                    response.get_data(as_text=True)
                )
            log_extra = {
                "event": "api.output",
                "request_id": getattr(g, "request_id", None),
                "path": request.path,
            }
            message = json.dumps(log_payload, ensure_ascii=False, default=str)
            if response.status_code >= 400:
                app.logger.warning(message, extra=log_extra)
            else:
                app.logger.info(message, extra=log_extra)
        return response

    @app.after_request
    def add_server_timing(response):
        start = getattr(g, "start_time", None)
        if start is not None:
            duration = (time.perf_counter() - start) * 1000
            response.headers["Server-Timing"] = f"app;dur={duration:.2f}"
        request_id = getattr(g, "request_id", None)
        if request_id:
            response.headers["X-Request-ID"] = request_id
        return response

    return app


def register_cli_commands(app):
    """CLI コマンドを登録"""
    import click

    from domain.email_sender import EmailServiceError
    from .services import get_email_service

    @app.cli.command("send-email")
    @click.option("--to", "to", required=True, help="受信者のメールアドレス")
    @click.option("--subject", required=True, help="件名")
    @click.option("--body", required=True, help="本文（プレーンテキスト）")
    def send_email_command(to, subject, body):
        """HTTP API と同じサービスでメールを1通送信する"""
        try:
            get_email_service().send_email(to, subject, body)
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
        except EmailServiceError as exc:
            cause = exc.__cause__
            detail = f" ({cause})" if cause else ""
            raise click.ClickException(f"{exc}{detail}") from exc
        click.echo(f"Email sent to {to}")

    @app.cli.command("check-config")
    def check_config():
        """メール送信設定を表示・検証する"""
        from core.settings import settings

        service = get_email_service()
        click.echo(f"Provider: {settings.mail_provider}")
        click.echo(f"Sender: {type(service.sender).__name__}")
        click.echo(f"AWS region: {settings.aws_region}")
        if not service.can_send_emails():
            raise click.ClickException("Email sender configuration is invalid")
        click.echo("Configuration is valid")
