"""Sender factory and initialization."""

from __future__ import annotations

import os
from typing import Optional

from ..config import ClientConfig, load_config
from .base import DO_SEND, BaseSender
from .http import HttpSender
from .loopback import LoopbackSender


def get_sender(
    backend: Optional[str] = None, config: Optional[ClientConfig] = None
) -> BaseSender:
    """Factory function to get the configured sender."""

    config = config or load_config()
    backend = (
        backend
        or os.getenv("AS2CLIENT_SENDER")
        or config.sender.backend
    ).lower()

    if backend == "http":
        return HttpSender(timeout=config.sender.timeout)
    elif backend == "loopback":
        return LoopbackSender()
    else:
        raise ValueError(f"Unsupported sender backend: {backend}")


__all__ = ["DO_SEND", "BaseSender", "HttpSender", "LoopbackSender", "get_sender"]
