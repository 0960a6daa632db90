"""Shared fixtures: a real PKCS#12 key store and matching client settings."""

from datetime import datetime, timedelta, timezone

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.serialization import BestAvailableEncryption, pkcs12
from cryptography.x509.oid import NameOID

from as2client.config import ClientSettings

KEYSTORE_PASSWORD = "secret"


def _self_signed(common_name: str):
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    subject = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.now(timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(subject)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=30))
        .sign(key, hashes.SHA256())
    )
    return key, cert


@pytest.fixture(scope="session")
def keystore_path(tmp_path_factory):
    """Key store holding our key pair (alias 'me') and the partner cert ('them')."""
    my_key, my_cert = _self_signed("ME")
    _, partner_cert = _self_signed("THEM")
    data = pkcs12.serialize_key_and_certificates(
        name=b"me",
        key=my_key,
        cert=my_cert,
        cas=[pkcs12.PKCS12Certificate(partner_cert, b"them")],
        encryption_algorithm=BestAvailableEncryption(KEYSTORE_PASSWORD.encode()),
    )
    path = tmp_path_factory.mktemp("keys") / "client.p12"
    path.write_bytes(data)
    return path


@pytest.fixture
def settings(keystore_path):
    return ClientSettings(
        sender_as2_id="ME",
        sender_key_alias="me",
        sender_email="as2@me.example",
        receiver_as2_id="THEM",
        receiver_key_alias="them",
        destination_url="https://partner.example/as2",
        sign_algorithm="sha-256",
        encrypt_algorithm="aes256-cbc",
        key_store_path=keystore_path,
        key_store_password=KEYSTORE_PASSWORD,
    )


MDN_BOUNDARY = "----=_Part_0_1"


@pytest.fixture
def mdn_report():
    """Builder for synchronous MDN bodies; returns ``(content_type, body)``."""

    def _build(message_id, disposition, mic=None):
        fields = (
            "Reporting-UA: partner-as2\r\n"
            "Final-Recipient: rfc822; THEM\r\n"
            f"Original-Message-ID: <{message_id}>\r\n"
            f"Disposition: {disposition}\r\n"
        )
        if mic:
            fields += f"Received-Content-MIC: {mic}\r\n"
        body = (
            f"--{MDN_BOUNDARY}\r\n"
            "Content-Type: text/plain\r\n\r\n"
            "The message was received and processed.\r\n"
            f"--{MDN_BOUNDARY}\r\n"
            "Content-Type: message/disposition-notification\r\n\r\n"
            f"{fields}\r\n"
            f"--{MDN_BOUNDARY}--\r\n"
        ).encode("ascii")
        content_type = (
            "multipart/report; report-type=disposition-notification; "
            f'boundary="{MDN_BOUNDARY}"'
        )
        return content_type, body

    return _build
