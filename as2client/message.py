"""Assembly of the AS2 message envelope."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from .constants import (
    DEFAULT_MESSAGE_ID_FORMAT,
    MESSAGE_ID_DATE_FORMAT,
    PA_AS2_URL,
    PA_MESSAGEID_FORMAT,
    PID_AS2,
    PID_EMAIL,
)
from .contracts import As2Message, ClientRequest, Partnership
from .errors import ProtocolError

logger = logging.getLogger(__name__)


def generate_message_id(partnership: Partnership) -> str:
    """Generate a new message id from the partnership's id format.

    Supported placeholders are ``{date}``, ``{uuid}``, ``{sender}`` and
    ``{receiver}``.
    """
    id_format = partnership.attribute(PA_MESSAGEID_FORMAT) or DEFAULT_MESSAGE_ID_FORMAT
    try:
        return id_format.format(
            date=datetime.now(timezone.utc).strftime(MESSAGE_ID_DATE_FORMAT),
            uuid=uuid.uuid4().hex,
            sender=partnership.sender_id(PID_AS2) or "",
            receiver=partnership.receiver_id(PID_AS2) or "",
        )
    except (KeyError, IndexError, ValueError) as e:
        raise ProtocolError(f"Invalid message id format '{id_format}': {e}") from e


def create_message(partnership: Partnership, request: ClientRequest) -> As2Message:
    """Build the envelope for ``request``.

    Raises:
        ProtocolError: If required partnership attributes are missing.
        SerializationError: If the request body cannot be rendered.
    """
    destination_url = partnership.attribute(PA_AS2_URL)
    receiver_id = partnership.receiver_id(PID_AS2)
    sender_id = partnership.sender_id(PID_AS2)
    if not destination_url:
        raise ProtocolError(f"Partnership {partnership.name} has no destination URL")
    if not sender_id or not receiver_id:
        raise ProtocolError(
            f"Partnership {partnership.name} is missing the sender or receiver AS2 id"
        )

    message_id = generate_message_id(partnership)
    body = request.render()
    logger.debug(f"Assembled message {message_id} for partnership {partnership.name}")

    return As2Message(
        content_type=request.content_type,
        subject=request.subject,
        partnership=partnership,
        message_id=message_id,
        attributes={
            PA_AS2_URL: destination_url,
            PID_AS2: receiver_id,
            PID_EMAIL: partnership.sender_id(PID_EMAIL),
        },
        body=body,
    )
