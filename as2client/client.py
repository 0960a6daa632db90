"""Synchronous AS2 send workflow."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

from .config import ClientSettings
from .contracts import As2Message, ClientRequest, ClientResponse, Mdn
from .errors import As2ClientError, TransmissionError
from .message import create_message
from .partnership import build_partnership
from .senders import DO_SEND, BaseSender, HttpSender
from .session import As2Session, open_session

logger = logging.getLogger(__name__)


class SendState(str, Enum):
    """Progress of a single send."""

    BUILT = "built"
    ASSEMBLED = "assembled"
    SESSION_READY = "session_ready"
    SENT = "sent"
    FAILED = "failed"
    COLLECTED = "collected"


class ResponseCollector:
    """Accumulates the outcome of one send into a :class:`ClientResponse`.

    Use :meth:`tracking` around the pipeline. Its finalizer reads the MDN off
    the message on every exit path, so an MDN attached before a failure is
    never lost.
    """

    def __init__(self) -> None:
        self.state = SendState.BUILT
        self.message: Optional[As2Message] = None
        self.mdn: Optional[Mdn] = None
        self.error: Optional[Exception] = None

    def advance(self, state: SendState) -> None:
        logger.debug(f"Send state {self.state.value} -> {state.value}")
        self.state = state

    @contextmanager
    def tracking(self) -> Iterator["ResponseCollector"]:
        try:
            yield self
        except Exception as e:
            logger.exception(f"Error sending message (state={self.state.value})")
            self.error = e
            self.state = SendState.FAILED
        finally:
            if self.message is not None and self.message.mdn is not None:
                # May be present even when sending failed
                self.mdn = self.message.mdn

    def collect(self) -> ClientResponse:
        response = ClientResponse()
        if self.message is not None:
            response.original_message_id = self.message.message_id
        if self.mdn is not None:
            response.mdn = self.mdn
        if self.error is not None:
            response.exception = self.error
        self.advance(SendState.COLLECTED)
        return response


def _transmit(sender: BaseSender, message: As2Message, session: As2Session) -> None:
    try:
        sender.handle(DO_SEND, message, session)
    except As2ClientError:
        raise
    except Exception as e:
        raise TransmissionError(f"Sender failed for message {message.message_id}: {e}") from e


def send_synchronous(
    settings: ClientSettings,
    request: ClientRequest,
    sender: Optional[BaseSender] = None,
) -> ClientResponse:
    """Send ``request`` to the partner described by ``settings``.

    Exactly one attempt is made. Failures are reported on the returned
    response rather than raised.

    Args:
        settings: Static connection settings.
        request: Outbound subject, content type and payload.
        sender: Transmission engine; defaults to :class:`HttpSender`.

    Returns:
        The response with the original message id, the MDN if one was
        received, and the failure cause if any step failed.
    """
    collector = ResponseCollector()
    with collector.tracking():
        partnership = build_partnership(settings)
        collector.message = create_message(partnership, request)
        collector.advance(SendState.ASSEMBLED)

        session = open_session(settings)
        collector.advance(SendState.SESSION_READY)

        _transmit(sender or HttpSender(), collector.message, session)
        collector.advance(SendState.SENT)

    response = collector.collect()
    logger.info(response.as_string())
    return response
