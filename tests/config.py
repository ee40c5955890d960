"""テスト専用の設定クラスを提供するモジュール。"""

from emailservice.config import Config


class TestConfig(Config):
    """テスト用の設定クラス"""

    __test__ = False

    TESTING = True
    LOG_LEVEL = "DEBUG"
    MAIL_PROVIDER = "console"
    MAIL_SOURCE_ADDRESS = "sender@example.com"
    AWS_REGION = "us-east-1"
