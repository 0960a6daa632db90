"""Base sender interface for transmitting AS2 messages."""

from __future__ import annotations

import abc

from ..contracts import As2Message
from ..errors import ProtocolError
from ..session import As2Session

DO_SEND = "send"


class BaseSender(metaclass=abc.ABCMeta):
    """Abstract transmission engine.

    A sender may attach an MDN to the message before raising; callers must
    read ``message.mdn`` on every exit path.
    """

    def handle(self, action: str, message: As2Message, session: As2Session) -> None:
        """Dispatch ``action`` for ``message``."""
        if action != DO_SEND:
            raise ProtocolError(f"Unsupported sender action: {action}")
        self.send(message, session)

    @abc.abstractmethod
    def send(self, message: As2Message, session: As2Session) -> None:
        """Transmit ``message`` and attach a synchronous MDN if one is returned."""
        raise NotImplementedError
