"""Parsing of synchronous message disposition notifications."""

from __future__ import annotations

from email import message_from_bytes
from email.message import Message
from typing import Optional

from ..contracts import Mdn


def parse_mdn(content_type: Optional[str], content: bytes) -> Optional[Mdn]:
    """Parse an MDN from an HTTP response body.

    Returns ``None`` when the body is empty. A ``multipart/report`` body is
    split into its human readable text and its disposition fields; any other
    body is kept as plain text.
    """
    if not content:
        return None

    raw = f"Content-Type: {content_type or 'text/plain'}\r\n\r\n".encode("ascii")
    report = message_from_bytes(raw + content)
    if not report.is_multipart():
        return Mdn(text=_decode(report).strip())

    text = ""
    fields: dict[str, str] = {}
    for part in report.walk():
        ctype = part.get_content_type()
        if ctype == "text/plain" and part.get("Content-Type") and not text:
            text = _decode(part).strip()
        elif ctype == "message/disposition-notification":
            fields.update(_disposition_fields(part))

    return Mdn(
        text=text,
        disposition=fields.get("disposition"),
        original_message_id=_strip_brackets(fields.get("original-message-id")),
        received_mic=fields.get("received-content-mic"),
        attributes=fields,
    )


def _disposition_fields(part: Message) -> dict[str, str]:
    payload = part.get_payload()
    blocks = payload if isinstance(payload, list) else [part]
    fields: dict[str, str] = {}
    for block in blocks:
        for key, value in block.items():
            if key.lower() in ("content-type", "content-transfer-encoding"):
                continue
            fields[key.lower()] = " ".join(str(value).split())
    return fields


def _decode(part: Message) -> str:
    data = part.get_payload(decode=True) or b""
    return data.decode(part.get_content_charset() or "utf-8", errors="replace")


def _strip_brackets(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip().strip("<>")
