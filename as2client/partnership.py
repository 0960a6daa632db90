"""Derive the per-send partnership from static client settings."""

from __future__ import annotations

from .config import ClientSettings
from .constants import (
    PA_AS2_MDN_OPTIONS,
    PA_AS2_RECEIPT_OPTION,
    PA_AS2_URL,
    PA_ENCRYPT,
    PA_MESSAGEID_FORMAT,
    PA_PROTOCOL,
    PA_SIGN,
    PID_AS2,
    PID_EMAIL,
    PID_X509_ALIAS,
    PROTOCOL_AS2,
)
from .contracts import Partnership


def build_partnership(settings: ClientSettings) -> Partnership:
    """Create a fresh :class:`Partnership` describing this exchange."""
    return Partnership(
        name=settings.partnership_name,
        sender_ids={
            PID_AS2: settings.sender_as2_id,
            PID_X509_ALIAS: settings.sender_key_alias,
            PID_EMAIL: settings.sender_email,
        },
        receiver_ids={
            PID_AS2: settings.receiver_as2_id,
            PID_X509_ALIAS: settings.receiver_key_alias,
        },
        attributes={
            PA_PROTOCOL: PROTOCOL_AS2,
            PA_AS2_URL: settings.destination_url,
            PA_ENCRYPT: settings.encrypt_algorithm,
            PA_SIGN: settings.sign_algorithm,
            PA_AS2_MDN_OPTIONS: settings.mdn_options,
            # Only synchronous MDNs are supported
            PA_AS2_RECEIPT_OPTION: None,
            PA_MESSAGEID_FORMAT: settings.message_id_format,
        },
    )
