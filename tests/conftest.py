import os
import sys
from pathlib import Path

import boto3
import pytest
from botocore.stub import Stubber

os.environ.setdefault("TESTING", "true")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from application.email_service import EmailSenderService  # noqa: E402
from tests.config import TestConfig  # noqa: E402
from tests.helpers.email_sender import RecordingEmailSender  # noqa: E402


@pytest.fixture
def recording_sender():
    """送信内容を記録するだけのテストダブル"""
    return RecordingEmailSender()


@pytest.fixture
def email_service(recording_sender):
    return EmailSenderService(sender=recording_sender)


@pytest.fixture
def app(email_service):
    """テストダブルを明示的に注入したアプリケーション"""
    from emailservice import create_app

    return create_app(TestConfig, email_service=email_service)


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def ses_client():
    """ネットワークに出ない boto3 SES クライアント（Stubber と組み合わせて使う）"""
    return boto3.client(
        "ses",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def ses_stubber(ses_client):
    with Stubber(ses_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()
