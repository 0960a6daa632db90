"""Core data contracts for the AS2 send workflow."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    AS2_VERSION,
    DEFAULT_CONTENT_TYPE,
    PA_AS2_MDN_OPTIONS,
    PA_AS2_URL,
    PID_AS2,
    PID_EMAIL,
)
from .serializer import MimeBody, PayloadSerializer


class Partnership(BaseModel):
    """Sender/receiver identifiers and negotiated attributes for one exchange."""

    name: str
    sender_ids: Dict[str, Optional[str]] = Field(default_factory=dict)
    receiver_ids: Dict[str, Optional[str]] = Field(default_factory=dict)
    attributes: Dict[str, Optional[str]] = Field(default_factory=dict)

    def sender_id(self, key: str) -> Optional[str]:
        return self.sender_ids.get(key)

    def receiver_id(self, key: str) -> Optional[str]:
        return self.receiver_ids.get(key)

    def attribute(self, key: str) -> Optional[str]:
        return self.attributes.get(key)


class Mdn(BaseModel):
    """Message disposition notification returned by the receiving partner."""

    text: str = ""
    disposition: Optional[str] = None
    original_message_id: Optional[str] = None
    received_mic: Optional[str] = None
    attributes: Dict[str, str] = Field(default_factory=dict)

    @property
    def status(self) -> Optional[str]:
        """Disposition modifier, e.g. ``processed`` or ``processed/error: ...``."""
        if not self.disposition or ";" not in self.disposition:
            return None
        return self.disposition.split(";", 1)[1].strip()

    @property
    def is_error(self) -> bool:
        status = (self.status or "").lower()
        return "error" in status or "failed" in status


class ClientRequest(BaseModel):
    """Outbound content to be sent to the partner."""

    subject: str
    content_type: str = DEFAULT_CONTENT_TYPE
    data: Union[bytes, str, Path] = b""
    charset: str = "utf-8"
    content_transfer_encoding: str = "binary"

    def render(self) -> MimeBody:
        """Render the request into a wire-ready body.

        Raises:
            SerializationError: If the payload cannot be read or encoded.
        """
        return PayloadSerializer.serialize(
            self.data,
            content_type=self.content_type,
            charset=self.charset,
            content_transfer_encoding=self.content_transfer_encoding,
        )


class As2Message(BaseModel):
    """
    Envelope handed to the sender module. Carries the partnership, a unique
    message id, mirrored attributes and the rendered body.
    """

    content_type: str
    subject: str
    partnership: Partnership
    message_id: str
    attributes: Dict[str, Optional[str]] = Field(default_factory=dict)
    body: MimeBody
    mdn: Optional[Mdn] = None

    def headers(self) -> Dict[str, str]:
        """Build the HTTP headers for transmitting this message."""
        headers = {
            "AS2-Version": AS2_VERSION,
            "AS2-From": self.partnership.sender_id(PID_AS2) or "",
            "AS2-To": self.attributes.get(PID_AS2) or "",
            "Message-ID": f"<{self.message_id}>",
            "Subject": self.subject,
            "Content-Type": self.body.content_type,
            "Content-Transfer-Encoding": self.body.content_transfer_encoding,
            "Mime-Version": "1.0",
        }
        sender_email = self.attributes.get(PID_EMAIL)
        if sender_email:
            headers["From"] = sender_email
        mdn_options = self.partnership.attribute(PA_AS2_MDN_OPTIONS)
        if mdn_options:
            # Sync MDN: ask for it without naming a return URL
            headers["Disposition-Notification-To"] = sender_email or "sync"
            headers["Disposition-Notification-Options"] = mdn_options
        return headers

    @property
    def destination_url(self) -> Optional[str]:
        return self.attributes.get(PA_AS2_URL)


class ClientResponse(BaseModel):
    """Outcome of a synchronous send. Always returned, never raised."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    original_message_id: str = ""
    mdn: Optional[Mdn] = None
    exception: Optional[Exception] = None

    @property
    def has_mdn(self) -> bool:
        return self.mdn is not None

    @property
    def has_exception(self) -> bool:
        return self.exception is not None

    def as_string(self) -> str:
        """Human readable summary of the response."""
        lines = [f"OriginalMessageID: {self.original_message_id or '<none>'}"]
        if self.mdn is not None:
            lines.append(f"MDN disposition: {self.mdn.disposition or '<none>'}")
            if self.mdn.text:
                lines.append(f"MDN text: {self.mdn.text}")
        if self.exception is not None:
            lines.append(
                f"Error: {type(self.exception).__name__}: {self.exception}"
            )
        if self.mdn is None and self.exception is None:
            lines.append("Sent without receiving an MDN")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.as_string()
