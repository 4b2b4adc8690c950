# -*- coding: utf-8 -*-
"""
Message input decoding.

Raw confirmation messages arrive as bytes (HTTP bodies, files, stdin).
Invalid UTF-8 is the one hard failure of the whole flow; everything that
decodes is handed to the parser as-is.
"""

from __future__ import annotations

from typing import Optional


class MessageDecodeError(ValueError):
    """Raw message is not valid text"""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def decode_message(raw: Optional[bytes], *, max_bytes: Optional[int] = None) -> str:
    """
    Decode a raw message as strict UTF-8.

    A leading BOM is dropped. Line endings are left untouched; the parser
    handles "\\n", "\\r\\n" and "\\r" itself.

    Raises:
        MessageDecodeError: too large or not valid UTF-8
    """
    if not raw:
        return ""
    if max_bytes is not None and len(raw) > max_bytes:
        raise MessageDecodeError(f"Message exceeds {max_bytes} bytes")
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MessageDecodeError(f"Message is not valid UTF-8: {e.reason} at byte {e.start}") from e
