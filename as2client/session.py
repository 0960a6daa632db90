"""Per-send runtime session wiring the certificate and partnership factories."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .certificates import PKCS12CertificateFactory
from .config import ClientSettings
from .errors import ComponentInitError
from .partners import BasePartnershipFactory, SelfFillingPartnershipFactory

logger = logging.getLogger(__name__)


@dataclass
class As2Session:
    """Runtime context for exactly one send. Never shared between sends."""

    certificate_factory: PKCS12CertificateFactory
    partnership_factory: BasePartnershipFactory


def open_session(settings: ClientSettings) -> As2Session:
    """Create a new session, loading certificates before partnerships.

    Raises:
        ComponentInitError: If either component fails to initialize.
    """
    certificate_factory = PKCS12CertificateFactory()
    certificate_factory.initialize(settings.key_store_path, settings.key_store_password)

    partnership_factory = SelfFillingPartnershipFactory()
    try:
        partnership_factory.initialize()
    except Exception as e:
        raise ComponentInitError(f"Cannot initialize partnership factory: {e}") from e

    logger.debug(f"Opened session with key store {certificate_factory.filename}")
    return As2Session(
        certificate_factory=certificate_factory,
        partnership_factory=partnership_factory,
    )
