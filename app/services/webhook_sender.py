# -*- coding: utf-8 -*-
"""
Webhook Sender Module

This module forwards parsed confirmations to the configured webhook.
"""

import logging
import requests
from app.config import WEBHOOK_URL, WEBHOOK_TIMEOUT
from app.parser import ParsedConfirmation

logger = logging.getLogger(__name__)


def build_confirmation_payload(confirmation: ParsedConfirmation) -> dict:
    """
    Build webhook payload for a parsed confirmation.

    Args:
        confirmation: ParsedConfirmation object

    Returns:
        dict: Payload dictionary ready for JSON serialization
    """
    payload = {"operation": "CONFIRMATION"}
    payload.update(confirmation.to_dict())
    return payload


def send_confirmation(confirmation: ParsedConfirmation) -> bool:
    """
    Send a parsed confirmation to the webhook.

    Args:
        confirmation: ParsedConfirmation object

    Returns:
        bool: True if success (or nothing to send), False if failed
    """
    if not WEBHOOK_URL:
        logger.warning("Webhook URL is not configured, skipping")
        return True

    payload = build_confirmation_payload(confirmation)

    try:
        logger.info(f"Sending webhook for account {confirmation.account}")

        response = requests.post(
            WEBHOOK_URL,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=WEBHOOK_TIMEOUT
        )

        if response.status_code in [200, 201, 202]:
            logger.info(f"Webhook sent successfully: {confirmation.account}")
            return True
        else:
            logger.error(f"Webhook failed with status {response.status_code}: {response.text}")
            return False

    except requests.Timeout:
        logger.error(f"Webhook request timeout for account {confirmation.account}")
        return False

    except requests.RequestException as e:
        logger.error(f"Webhook request failed for account {confirmation.account}: {e}")
        return False
