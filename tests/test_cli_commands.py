"""CLI コマンドのテスト。"""
from __future__ import annotations


class TestSendEmailCommand:
    """flask send-email"""

    def test_send_email_success(self, app, recording_sender):
        runner = app.test_cli_runner()

        result = runner.invoke(
            args=["send-email", "--to", "a@b.com", "--subject", "Hi", "--body", "Hello"]
        )

        assert result.exit_code == 0
        assert "Email sent to a@b.com" in result.output
        assert recording_sender.sent[0].to == "a@b.com"

    def test_send_email_provider_failure(self, app, recording_sender):
        recording_sender.fail_with(RuntimeError("MessageRejected"))
        runner = app.test_cli_runner()

        result = runner.invoke(
            args=["send-email", "--to", "a@b.com", "--subject", "Hi", "--body", "Hello"]
        )

        assert result.exit_code == 1
        assert "Erro enquanto enviava o email" in result.output
        assert "MessageRejected" in result.output

    def test_send_email_invalid_recipient(self, app, recording_sender):
        runner = app.test_cli_runner()

        result = runner.invoke(
            args=["send-email", "--to", "nobody", "--subject", "Hi", "--body", "Hello"]
        )

        assert result.exit_code == 1
        assert "Invalid recipient address" in result.output
        assert recording_sender.sent == []

    def test_send_email_requires_options(self, app):
        result = app.test_cli_runner().invoke(args=["send-email", "--to", "a@b.com"])

        assert result.exit_code == 2


class TestCheckConfigCommand:
    """flask check-config"""

    def test_valid_configuration(self, app):
        result = app.test_cli_runner().invoke(args=["check-config"])

        assert result.exit_code == 0
        assert "Provider: console" in result.output
        assert "Sender: RecordingEmailSender" in result.output
        assert "AWS region: us-east-1" in result.output
        assert "Configuration is valid" in result.output

    def test_invalid_configuration(self, app, recording_sender):
        recording_sender.configured = False

        result = app.test_cli_runner().invoke(args=["check-config"])

        assert result.exit_code == 1
        assert "Email sender configuration is invalid" in result.output
