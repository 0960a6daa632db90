"""Rendering of outbound payloads into wire-ready MIME bodies."""

from __future__ import annotations

import base64
import hashlib
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from .errors import ProtocolError, SerializationError

# AS2 micalg names -> hashlib names
MIC_ALGORITHMS = {
    "md5": "md5",
    "sha1": "sha1",
    "sha-1": "sha1",
    "sha256": "sha256",
    "sha-256": "sha256",
    "sha384": "sha384",
    "sha-384": "sha384",
    "sha512": "sha512",
    "sha-512": "sha512",
}

TRANSFER_ENCODINGS = ("binary", "8bit", "7bit", "base64")


class MimeBody(BaseModel):
    """A single MIME body part ready to be put on the wire."""

    content_type: str
    content_transfer_encoding: str = "binary"
    data: bytes = b""

    def encoded_data(self) -> bytes:
        if self.content_transfer_encoding == "base64":
            return base64.encodebytes(self.data)
        return self.data

    def compute_mic(self, algorithm: str) -> str:
        """Compute the message integrity check as ``<base64 digest>, <alg>``.

        The digest covers the transmitted content without its MIME headers,
        which is what the partner hashes for an unsigned message.
        """
        hash_name = MIC_ALGORITHMS.get(algorithm.lower())
        if hash_name is None:
            raise ProtocolError(f"Unsupported MIC algorithm: {algorithm}")
        digest = hashlib.new(hash_name, self.encoded_data()).digest()
        return f"{base64.b64encode(digest).decode('ascii')}, {algorithm.lower()}"


class PayloadSerializer:
    """
    Serialize outbound content into a :class:`MimeBody`.

    Supports:
    - raw bytes
    - text, encoded with the given charset
    - filesystem paths, read at render time
    """

    @staticmethod
    def serialize(
        data: Any,
        content_type: str,
        charset: str = "utf-8",
        content_transfer_encoding: str = "binary",
    ) -> MimeBody:
        if content_transfer_encoding not in TRANSFER_ENCODINGS:
            raise SerializationError(
                f"Unsupported content transfer encoding: {content_transfer_encoding}"
            )

        if isinstance(data, (bytes, bytearray)):
            raw = bytes(data)
        elif isinstance(data, str):
            try:
                raw = data.encode(charset)
            except (LookupError, UnicodeEncodeError) as e:
                raise SerializationError(
                    f"Cannot encode payload with charset '{charset}': {e}"
                ) from e
            if "charset=" not in content_type.lower():
                content_type = f"{content_type}; charset={charset}"
        elif isinstance(data, Path):
            try:
                raw = data.read_bytes()
            except OSError as e:
                raise SerializationError(f"Cannot read payload file '{data}': {e}") from e
        else:
            raise SerializationError(
                f"Cannot serialize payload of type '{type(data).__name__}'"
            )

        return MimeBody(
            content_type=content_type,
            content_transfer_encoding=content_transfer_encoding,
            data=raw,
        )
