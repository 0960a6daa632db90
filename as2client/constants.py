"""Identifiers and defaults shared across the AS2 client."""

PROTOCOL_AS2 = "as2"
AS2_VERSION = "1.2"

# Partnership sender/receiver id keys
PID_AS2 = "as2_id"
PID_X509_ALIAS = "x509_alias"
PID_EMAIL = "email"

# Partnership attribute keys
PA_PROTOCOL = "protocol"
PA_AS2_URL = "as2_url"
PA_ENCRYPT = "encrypt"
PA_SIGN = "sign"
PA_AS2_MDN_OPTIONS = "as2_mdn_options"
PA_AS2_RECEIPT_OPTION = "as2_receipt_option"
PA_MESSAGEID_FORMAT = "messageid_format"

DEFAULT_MDN_OPTIONS = (
    "signed-receipt-protocol=optional, pkcs7-signature; "
    "signed-receipt-micalg=optional, sha-256"
)
DEFAULT_MESSAGE_ID_FORMAT = "AS2CLIENT-{date}-{uuid}@{sender}_{receiver}"
MESSAGE_ID_DATE_FORMAT = "%d%m%Y%H%M%S%z"

DEFAULT_CONTENT_TYPE = "application/octet-stream"
DEFAULT_SEND_TIMEOUT = 60.0
