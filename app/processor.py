# -*- coding: utf-8 -*-
"""
Confirmation Processor

Service-side entry around the pure parser: runs the extraction, logs
rejected and ambiguous messages for later analysis and optionally forwards
successful results to the webhook.
"""

import logging
from typing import Optional

from app.parser import inspect_confirmation, ConfirmationReport, ExtractionStatus
from app.services.webhook_sender import send_confirmation

logger = logging.getLogger(__name__)


def _log_report(report: ConfirmationReport, text: str) -> None:
    if report.result is not None:
        logger.info(
            f"Parsed confirmation: account={report.result.account} amount={report.result.amount}"
        )
        return

    for extraction in report.fields:
        if extraction.status is ExtractionStatus.AMBIGUOUS:
            logger.warning(
                f"Ambiguous {extraction.field.value}: pattern {extraction.pattern_name} "
                f"matched {extraction.match_count} lines"
            )
        elif extraction.status is ExtractionStatus.NOT_FOUND:
            logger.info(f"No {extraction.field.value} found")

    # Full text only at debug level: it may contain the one-time password
    logger.debug(f"Rejected confirmation text: {text!r}")


def process_confirmation(text: Optional[str], *, forward: bool = False) -> ConfirmationReport:
    """
    Parse a confirmation message and log the outcome.

    Args:
        text: confirmation message
        forward: if True, send a successful result to the webhook

    Returns:
        ConfirmationReport: per-field details and the combined result
    """
    report = inspect_confirmation(text)
    _log_report(report, text or "")

    if forward and report.result is not None:
        if not send_confirmation(report.result):
            logger.error(f"Failed to forward confirmation for account {report.result.account}")

    return report
