"""as2client: synchronous AS2 message sending with MDN handling."""

from .client import ResponseCollector, SendState, send_synchronous
from .config import ClientConfig, ClientSettings, load_config
from .contracts import As2Message, ClientRequest, ClientResponse, Mdn, Partnership
from .errors import (
    As2ClientError,
    ComponentInitError,
    ProtocolError,
    SerializationError,
    TransmissionError,
)
from .senders import BaseSender, HttpSender, LoopbackSender, get_sender

__version__ = "0.1.0"
__all__ = [
    "As2ClientError",
    "As2Message",
    "BaseSender",
    "ClientConfig",
    "ClientRequest",
    "ClientResponse",
    "ClientSettings",
    "ComponentInitError",
    "HttpSender",
    "LoopbackSender",
    "Mdn",
    "Partnership",
    "ProtocolError",
    "ResponseCollector",
    "SendState",
    "SerializationError",
    "TransmissionError",
    "get_sender",
    "load_config",
    "send_synchronous",
]
