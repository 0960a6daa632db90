"""Partnership resolution for the send session."""

from __future__ import annotations

import abc
import logging
import threading
from typing import Dict

from .contracts import As2Message, Partnership

logger = logging.getLogger(__name__)


class BasePartnershipFactory(metaclass=abc.ABCMeta):
    """Abstract lookup of partnerships known to the session."""

    def initialize(self) -> None:
        """Prepare the factory for use (no-op by default)."""
        pass

    @abc.abstractmethod
    def get_partnership(self, partnership: Partnership) -> Partnership:
        """Return the stored partnership matching ``partnership``."""
        raise NotImplementedError

    def update_partnership(self, message: As2Message) -> None:
        """Fill missing ids and attributes of the message's partnership."""
        stored = self.get_partnership(message.partnership)
        current = message.partnership
        for target, source in (
            (current.sender_ids, stored.sender_ids),
            (current.receiver_ids, stored.receiver_ids),
            (current.attributes, stored.attributes),
        ):
            for key, value in source.items():
                target.setdefault(key, value)


class SelfFillingPartnershipFactory(BasePartnershipFactory):
    """Keep partnerships in local memory, adding unknown ones on first lookup.

    Nothing is persisted across sessions.
    """

    def __init__(self) -> None:
        self._partnerships: Dict[str, Partnership] = {}
        self._lock = threading.Lock()

    def get_partnership(self, partnership: Partnership) -> Partnership:
        with self._lock:
            stored = self._partnerships.get(partnership.name)
            if stored is None:
                logger.debug(f"Adding unknown partnership {partnership.name}")
                stored = partnership.model_copy(deep=True)
                self._partnerships[partnership.name] = stored
            return stored
