# -*- coding: utf-8 -*-
"""Confirmation parser CLI.

Reads one confirmation message from a file (or stdin) and prints JSON.

    python -m app.confirmation_cli parse message.txt
    cat message.txt | python -m app.confirmation_cli inspect

Exit codes: 0 parsed, 1 not all fields found, 2 unreadable input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional

from app.config import LOG_LEVEL, MAX_MESSAGE_BYTES
from app.message_input import MessageDecodeError, decode_message
from app.processor import process_confirmation

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_BAD_INPUT = 2


def _print_json(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False))
    sys.stdout.write("\n")


def _read_raw(path: Optional[str]) -> bytes:
    if not path or path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _load_text(args: argparse.Namespace) -> Optional[str]:
    try:
        raw = _read_raw(args.file)
    except OSError as e:
        _print_json({"status": "error", "error": {"message": str(e)}})
        return None
    try:
        return decode_message(raw, max_bytes=MAX_MESSAGE_BYTES)
    except MessageDecodeError as e:
        _print_json({"status": "error", "error": {"message": e.reason}})
        return None


def cmd_parse(args: argparse.Namespace) -> int:
    text = _load_text(args)
    if text is None:
        return EXIT_BAD_INPUT

    report = process_confirmation(text, forward=bool(args.forward))
    if report.result is None:
        _print_json({"status": "not_found"})
        return EXIT_NOT_FOUND

    _print_json({"status": "ok", "confirmation": report.result.to_dict()})
    return EXIT_OK


def cmd_inspect(args: argparse.Namespace) -> int:
    text = _load_text(args)
    if text is None:
        return EXIT_BAD_INPUT

    report = process_confirmation(text)
    _print_json(report.to_dict())
    return EXIT_OK if report.result is not None else EXIT_NOT_FOUND


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="confirmation-parser")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Extract password, account and amount")
    p_parse.add_argument("file", nargs="?", default="-", help="Message file (default: stdin)")
    p_parse.add_argument("--forward", action="store_true", help="Send the result to WEBHOOK_URL")
    p_parse.set_defaults(func=cmd_parse)

    p_inspect = sub.add_parser("inspect", help="Show per-field match details")
    p_inspect.add_argument("file", nargs="?", default="-", help="Message file (default: stdin)")
    p_inspect.set_defaults(func=cmd_inspect)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
