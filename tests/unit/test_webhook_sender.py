#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Webhook Sender unit tests

Covers:
- build_confirmation_payload()
- send_confirmation() success, failure, timeout and missing URL
"""

from decimal import Decimal
from unittest.mock import Mock, patch

import pytest
import requests

from app.parser import ParsedConfirmation
from app.services import webhook_sender
from app.services.webhook_sender import build_confirmation_payload, send_confirmation


@pytest.fixture
def confirmation():
    return ParsedConfirmation(password="6062", account="410011995006381", amount=Decimal("123.20"))


@pytest.fixture
def webhook_url(monkeypatch):
    url = "https://hooks.example.com/confirmation"
    monkeypatch.setattr(webhook_sender, "WEBHOOK_URL", url)
    return url


class TestBuildPayload:

    def test_payload(self, confirmation):
        assert build_confirmation_payload(confirmation) == {
            "operation": "CONFIRMATION",
            "password": "6062",
            "account": "410011995006381",
            "amount": "123.20",
        }


class TestSendConfirmation:

    @patch("app.services.webhook_sender.requests.post")
    def test_success(self, mock_post, confirmation, webhook_url):
        mock_post.return_value = Mock(status_code=200, text="ok")

        assert send_confirmation(confirmation) is True

        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        assert args[0] == webhook_url
        assert kwargs["json"]["account"] == "410011995006381"
        assert kwargs["timeout"] == webhook_sender.WEBHOOK_TIMEOUT

    @patch("app.services.webhook_sender.requests.post")
    def test_accepted(self, mock_post, confirmation, webhook_url):
        mock_post.return_value = Mock(status_code=202, text="")
        assert send_confirmation(confirmation) is True

    @patch("app.services.webhook_sender.requests.post")
    def test_server_error(self, mock_post, confirmation, webhook_url):
        mock_post.return_value = Mock(status_code=500, text="boom")
        assert send_confirmation(confirmation) is False

    @patch("app.services.webhook_sender.requests.post")
    def test_timeout(self, mock_post, confirmation, webhook_url):
        mock_post.side_effect = requests.Timeout()
        assert send_confirmation(confirmation) is False

    @patch("app.services.webhook_sender.requests.post")
    def test_connection_error(self, mock_post, confirmation, webhook_url):
        mock_post.side_effect = requests.ConnectionError("refused")
        assert send_confirmation(confirmation) is False

    @patch("app.services.webhook_sender.requests.post")
    def test_no_url_configured(self, mock_post, confirmation, monkeypatch):
        monkeypatch.setattr(webhook_sender, "WEBHOOK_URL", "")
        assert send_confirmation(confirmation) is True
        mock_post.assert_not_called()
