"""Tests for deriving partnerships from settings."""

from as2client.constants import (
    PA_AS2_MDN_OPTIONS,
    PA_AS2_RECEIPT_OPTION,
    PA_AS2_URL,
    PA_ENCRYPT,
    PA_PROTOCOL,
    PA_SIGN,
    PID_AS2,
    PID_EMAIL,
    PID_X509_ALIAS,
    PROTOCOL_AS2,
)
from as2client.partnership import build_partnership


def test_build_partnership_ids(settings):
    partnership = build_partnership(settings)

    assert partnership.name == "ME-THEM"
    assert partnership.sender_ids == {
        PID_AS2: "ME",
        PID_X509_ALIAS: "me",
        PID_EMAIL: "as2@me.example",
    }
    assert partnership.receiver_ids == {PID_AS2: "THEM", PID_X509_ALIAS: "them"}


def test_build_partnership_attributes(settings):
    attributes = build_partnership(settings).attributes

    assert attributes[PA_PROTOCOL] == PROTOCOL_AS2
    assert attributes[PA_AS2_URL] == "https://partner.example/as2"
    assert attributes[PA_ENCRYPT] == "aes256-cbc"
    assert attributes[PA_SIGN] == "sha-256"
    assert attributes[PA_AS2_MDN_OPTIONS] == settings.mdn_options


def test_async_receipt_always_cleared(settings):
    attributes = build_partnership(settings).attributes
    assert PA_AS2_RECEIPT_OPTION in attributes
    assert attributes[PA_AS2_RECEIPT_OPTION] is None


def test_build_partnership_is_fresh_each_call(settings):
    first = build_partnership(settings)
    second = build_partnership(settings)

    assert first == second
    assert first is not second
    first.attributes[PA_AS2_URL] = "changed"
    assert second.attributes[PA_AS2_URL] == "https://partner.example/as2"
