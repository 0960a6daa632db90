"""Error types raised while sending AS2 messages."""


class As2ClientError(Exception):
    """Base class for failures inside the send workflow."""


class SerializationError(As2ClientError):
    """The outbound payload could not be rendered into a message body."""


class ProtocolError(As2ClientError):
    """Partnership or message attributes are missing or inconsistent."""


class ComponentInitError(As2ClientError):
    """A session component (certificates, partnerships) failed to initialize."""


class TransmissionError(As2ClientError):
    """Delivery failed: network, cryptographic or remote rejection."""
