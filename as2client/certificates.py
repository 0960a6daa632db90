"""Certificate and key lookup backed by a PKCS#12 key store."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from cryptography import x509
from cryptography.hazmat.primitives.serialization import pkcs12

from .errors import ComponentInitError

logger = logging.getLogger(__name__)


class PKCS12CertificateFactory:
    """Provides certificates and private keys by alias from a PKCS#12 file.

    Aliases are the friendly names stored in the key store. The private key
    of the store belongs to the alias of its own certificate; the additional
    certificates are partner certificates without keys.
    """

    def __init__(self) -> None:
        self.filename: Optional[Path] = None
        self._certificates: Dict[str, x509.Certificate] = {}
        self._private_keys: Dict[str, Any] = {}

    def initialize(self, filename: Path | str, password: str) -> None:
        """Load the key store at ``filename``.

        Raises:
            ComponentInitError: On a missing file, wrong password or corrupt store.
        """
        path = Path(filename).expanduser().absolute()
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ComponentInitError(f"Cannot read key store '{path}': {e}") from e

        try:
            store = pkcs12.load_pkcs12(data, password.encode("utf-8") if password else None)
        except (TypeError, ValueError) as e:
            raise ComponentInitError(f"Cannot load key store '{path}': {e}") from e

        certificates: Dict[str, x509.Certificate] = {}
        private_keys: Dict[str, Any] = {}
        if store.cert is not None:
            alias = _alias(store.cert.friendly_name)
            certificates[alias] = store.cert.certificate
            if store.key is not None:
                private_keys[alias] = store.key
        for entry in store.additional_certs:
            certificates[_alias(entry.friendly_name)] = entry.certificate

        self.filename = path
        self._certificates = certificates
        self._private_keys = private_keys
        logger.debug(f"Loaded {len(certificates)} certificate(s) from {path}")

    def get_certificate(self, alias: str) -> x509.Certificate:
        try:
            return self._certificates[alias.lower()]
        except KeyError:
            raise KeyError(f"No certificate with alias '{alias}' in key store") from None

    def get_private_key(self, alias: str) -> Any:
        try:
            return self._private_keys[alias.lower()]
        except KeyError:
            raise KeyError(f"No private key with alias '{alias}' in key store") from None


def _alias(friendly_name: Optional[bytes]) -> str:
    # PKCS#12 friendly names are case-insensitive aliases
    return (friendly_name or b"").decode("utf-8").lower()
