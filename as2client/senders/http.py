"""HTTP sender delivering AS2 messages and reading synchronous MDNs."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from ..constants import DEFAULT_SEND_TIMEOUT, PA_ENCRYPT, PA_SIGN, PID_X509_ALIAS
from ..contracts import As2Message
from ..errors import TransmissionError
from ..session import As2Session
from .base import BaseSender
from .mdn import parse_mdn

logger = logging.getLogger(__name__)

DEFAULT_MIC_ALGORITHM = "sha-256"


class HttpSender(BaseSender):
    """Posts the message body to the partner's AS2 URL.

    The S/MIME envelope is not built here: the configured keys are resolved
    so that key store problems surface before anything is sent, and the body
    is transmitted as rendered.
    """

    def __init__(self, timeout: float = DEFAULT_SEND_TIMEOUT) -> None:
        self.timeout = timeout

    def send(self, message: As2Message, session: As2Session) -> None:
        url = message.destination_url
        if not url:
            raise TransmissionError(f"Message {message.message_id} has no destination URL")

        session.partnership_factory.update_partnership(message)
        self._resolve_keys(message, session)

        sign_algorithm = message.partnership.attribute(PA_SIGN)
        mic = message.body.compute_mic(sign_algorithm or DEFAULT_MIC_ALGORITHM)
        payload = message.body.encoded_data()

        logger.info(f"Sending message {message.message_id} to {url} ({len(payload)} bytes)")
        try:
            response = requests.post(
                url,
                data=payload,
                headers=message.headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransmissionError(f"Failed to send message {message.message_id}: {e}") from e

        message.mdn = parse_mdn(response.headers.get("Content-Type"), response.content)
        if message.mdn is None:
            logger.info(f"Message {message.message_id} sent, no MDN returned")
            return

        logger.info(
            f"Received MDN for {message.message_id}: {message.mdn.disposition}"
        )
        self._check_mdn(message, mic)

    def _resolve_keys(self, message: As2Message, session: As2Session) -> None:
        partnership = message.partnership
        certificates = session.certificate_factory
        try:
            if partnership.attribute(PA_SIGN):
                certificates.get_private_key(partnership.sender_id(PID_X509_ALIAS) or "")
            if partnership.attribute(PA_ENCRYPT):
                certificates.get_certificate(partnership.receiver_id(PID_X509_ALIAS) or "")
        except KeyError as e:
            raise TransmissionError(str(e.args[0]) if e.args else str(e)) from e

    def _check_mdn(self, message: As2Message, mic: Optional[str]) -> None:
        """Validate the attached MDN; failures leave it on the message."""
        mdn = message.mdn
        if mdn.is_error:
            raise TransmissionError(f"Partner reported an error disposition: {mdn.disposition}")
        if mdn.original_message_id and mdn.original_message_id != message.message_id:
            raise TransmissionError(
                f"MDN refers to message {mdn.original_message_id}, expected {message.message_id}"
            )
        if mdn.received_mic and mic and not _same_mic(mdn.received_mic, mic):
            raise TransmissionError(
                f"MIC mismatch for {message.message_id}: sent {mic}, received {mdn.received_mic}"
            )


def _same_mic(received: str, sent: str) -> bool:
    # Only the digest is compared, partners spell the algorithm differently
    return received.split(",")[0].strip() == sent.split(",")[0].strip()

