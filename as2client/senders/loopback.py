"""Loopback sender for testing."""

from __future__ import annotations

import threading
from typing import List

from ..contracts import As2Message, Mdn
from ..session import As2Session
from .base import BaseSender

PROCESSED_DISPOSITION = "automatic-action/MDN-sent-automatically; processed"


class LoopbackSender(BaseSender):
    """Keeps sent messages in memory and answers each with a processed MDN."""

    def __init__(self) -> None:
        self.sent: List[As2Message] = []
        self._lock = threading.Lock()

    def send(self, message: As2Message, session: As2Session) -> None:
        session.partnership_factory.update_partnership(message)
        with self._lock:
            self.sent.append(message)
        message.mdn = Mdn(
            text="processed",
            disposition=PROCESSED_DISPOSITION,
            original_message_id=message.message_id,
        )
