"""Centralised application settings abstraction.

This module exposes :class:`ApplicationSettings` which consolidates all
configuration lookups for the email service.  The Flask application config
takes precedence when an application context is active; otherwise the process
environment (or any mapping provided) is used as the backing store.

The global :data:`settings` instance should be used for production code, while
tests can instantiate their own :class:`ApplicationSettings` with a dedicated
mapping to validate behaviour in isolation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Optional, cast

from flask import current_app, has_app_context

if TYPE_CHECKING:  # pragma: no cover
    from flask import Flask


_DEFAULT_MAIL_PROVIDER = "ses"
_DEFAULT_AWS_REGION = "sa-east-1"


@dataclass(frozen=True)
class _EnvironmentFacade:
    """Thin wrapper that provides ``Mapping`` compatible access to env vars."""

    source: Mapping[str, str]

    @classmethod
    def from_environ(cls, env: Optional[Mapping[str, str]] = None) -> "_EnvironmentFacade":
        return cls(source=os.environ if env is None else env)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.source.get(key, default)


class ApplicationSettings:
    """Domain level representation of configuration values.

    The class favours explicit properties instead of generic ``get`` access so
    that the rest of the application operates on intent-revealing names.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None) -> None:
        self._env = _EnvironmentFacade.from_environ(env)

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------
    def _get(self, key: str, default: Optional[str] = None):
        if has_app_context():
            app = cast("Flask", current_app)
            if key in app.config:
                return app.config.get(key)

        value = self._env.get(key)
        if value is not None:
            return value

        return default

    def get(self, key: str, default=None):
        """Return the configured value for *key* or *default* if missing."""

        value = self._get(key)
        return default if value is None else value

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return a boolean configuration value."""

        value = self._get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            normalised = value.strip().lower()
            if normalised in {"1", "true", "yes", "on"}:
                return True
            if normalised in {"0", "false", "no", "off"}:
                return False
        return default

    def _get_str(self, key: str) -> Optional[str]:
        value = self._get(key)
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    # ------------------------------------------------------------------
    # Generic flags
    # ------------------------------------------------------------------
    @property
    def testing(self) -> bool:
        return self.get_bool("TESTING")

    @property
    def log_level(self) -> str:
        return str(self.get("LOG_LEVEL", "INFO")).upper()

    # ------------------------------------------------------------------
    # Mail delivery
    # ------------------------------------------------------------------
    @property
    def mail_provider(self) -> str:
        return str(self.get("MAIL_PROVIDER", _DEFAULT_MAIL_PROVIDER)).lower().strip()

    @property
    def mail_source_address(self) -> Optional[str]:
        # SES で検証済みのアドレスのみ指定可能。リクエスト単位では変更できない。
        return self._get_str("MAIL_SOURCE_ADDRESS")

    # ------------------------------------------------------------------
    # AWS credentials
    # ------------------------------------------------------------------
    @property
    def aws_access_key_id(self) -> Optional[str]:
        return self._get_str("AWS_ACCESS_KEY_ID")

    @property
    def aws_secret_access_key(self) -> Optional[str]:
        return self._get_str("AWS_SECRET_ACCESS_KEY")

    @property
    def aws_region(self) -> str:
        return self._get_str("AWS_REGION") or _DEFAULT_AWS_REGION

    @property
    def aws_ses_endpoint_url(self) -> Optional[str]:
        return self._get_str("AWS_SES_ENDPOINT_URL")


settings = ApplicationSettings()

__all__ = ["ApplicationSettings", "settings"]
