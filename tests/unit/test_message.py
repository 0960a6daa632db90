"""Tests for message assembly."""

import re

import pytest

from as2client.constants import PA_AS2_URL, PA_MESSAGEID_FORMAT, PID_AS2, PID_EMAIL
from as2client.contracts import ClientRequest, Partnership
from as2client.errors import ProtocolError, SerializationError
from as2client.message import create_message, generate_message_id
from as2client.partnership import build_partnership

DEFAULT_ID_PATTERN = re.compile(r"^AS2CLIENT-\d{14}\+0000-[0-9a-f]{32}@ME_THEM$")


def test_create_message_copies_request_and_partnership(settings):
    partnership = build_partnership(settings)
    request = ClientRequest(
        subject="Invoice 42", content_type="application/edifact", data=b"UNA:+.? '"
    )

    message = create_message(partnership, request)

    assert message.subject == "Invoice 42"
    assert message.content_type == "application/edifact"
    assert message.partnership is partnership
    assert message.body.data == b"UNA:+.? '"
    assert message.attributes == {
        PA_AS2_URL: "https://partner.example/as2",
        PID_AS2: "THEM",
        PID_EMAIL: "as2@me.example",
    }
    assert message.mdn is None
    assert DEFAULT_ID_PATTERN.match(message.message_id)


def test_message_attributes_are_not_aliased(settings):
    partnership = build_partnership(settings)
    message = create_message(partnership, ClientRequest(subject="s"))

    message.attributes[PA_AS2_URL] = "https://other.example"
    assert partnership.attributes[PA_AS2_URL] == "https://partner.example/as2"


def test_each_message_gets_a_new_id(settings):
    partnership = build_partnership(settings)
    request = ClientRequest(subject="s")
    ids = {create_message(partnership, request).message_id for _ in range(20)}
    assert len(ids) == 20


def test_custom_message_id_format():
    partnership = Partnership(
        name="p",
        sender_ids={PID_AS2: "ME"},
        receiver_ids={PID_AS2: "THEM"},
        attributes={PA_MESSAGEID_FORMAT: "<{sender}-{uuid}>"},
    )
    assert re.match(r"^<ME-[0-9a-f]{32}>$", generate_message_id(partnership))


def test_unknown_placeholder_raises_protocol_error():
    partnership = Partnership(
        name="p",
        sender_ids={PID_AS2: "ME"},
        receiver_ids={PID_AS2: "THEM"},
        attributes={PA_MESSAGEID_FORMAT: "{uuid}-{host}"},
    )
    with pytest.raises(ProtocolError):
        generate_message_id(partnership)


def test_missing_destination_raises_protocol_error():
    partnership = Partnership(
        name="p", sender_ids={PID_AS2: "ME"}, receiver_ids={PID_AS2: "THEM"}
    )
    with pytest.raises(ProtocolError, match="destination URL"):
        create_message(partnership, ClientRequest(subject="s"))


def test_missing_receiver_raises_protocol_error():
    partnership = Partnership(
        name="p",
        sender_ids={PID_AS2: "ME"},
        attributes={PA_AS2_URL: "https://partner.example/as2"},
    )
    with pytest.raises(ProtocolError):
        create_message(partnership, ClientRequest(subject="s"))


def test_unreadable_payload_raises_serialization_error(settings, tmp_path):
    request = ClientRequest(subject="s", data=tmp_path / "missing.edi")
    with pytest.raises(SerializationError):
        create_message(build_partnership(settings), request)


def test_message_headers(settings):
    message = create_message(
        build_partnership(settings),
        ClientRequest(subject="Order", content_type="application/xml", data="<a/>"),
    )
    headers = message.headers()

    assert headers["AS2-From"] == "ME"
    assert headers["AS2-To"] == "THEM"
    assert headers["Message-ID"] == f"<{message.message_id}>"
    assert headers["Subject"] == "Order"
    assert headers["From"] == "as2@me.example"
    assert headers["Content-Type"] == "application/xml; charset=utf-8"
    assert headers["Disposition-Notification-Options"] == settings.mdn_options
