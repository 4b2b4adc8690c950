# -*- coding: utf-8 -*-
"""
Serverless Function - Confirmation Parser Entry Point

This module handles:
1. Receive POST requests carrying a confirmation message
   (JSON {"text": "..."} or a raw text/plain body)
2. Decode the body as UTF-8
3. Parse password, account and amount
4. Return the result (200) or a not-found report (422)
"""

import sys
from pathlib import Path

# Add project root to sys.path for local development
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
from flask import Flask, request, jsonify

from app.config import LOG_LEVEL, MAX_MESSAGE_BYTES
from app.message_input import MessageDecodeError, decode_message
from app.processor import process_confirmation

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = MAX_MESSAGE_BYTES


def _error(message: str, status: int):
    return jsonify({"status": "error", "error": {"message": message}}), status


def _read_message():
    """Return (text, error_response); exactly one of them is None"""
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict) or not isinstance(payload.get("text"), str):
            return None, _error("JSON body must be an object with a string 'text'", 400)
        return payload["text"], None

    try:
        return decode_message(request.get_data(), max_bytes=MAX_MESSAGE_BYTES), None
    except MessageDecodeError as e:
        logger.warning(f"Rejected request body: {e.reason}")
        return None, _error(e.reason, 400)


@app.route("/api/confirmation", methods=['GET'])
def health():
    """Health check"""
    return 'Confirmation parser is running!', 200


@app.route("/api/confirmation", methods=['POST'])
def parse():
    """Parse one confirmation message"""
    text, error = _read_message()
    if error is not None:
        return error

    forward = request.args.get("forward", "").lower() in ("1", "true", "yes")
    report = process_confirmation(text, forward=forward)

    if report.result is None:
        body = report.to_dict()
        return jsonify(body), 422

    return jsonify({"status": "ok", "confirmation": report.result.to_dict()}), 200


@app.errorhandler(413)
def too_large(_e):
    return _error(f"Message exceeds {MAX_MESSAGE_BYTES} bytes", 413)


if __name__ == "__main__":
    app.run(debug=True, port=5000)
