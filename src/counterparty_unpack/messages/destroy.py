from counterparty_unpack.binary.reader import ByteReader
from counterparty_unpack.messages.common import (
    DEFAULT_CONTEXT,
    read_asset,
    require_min_length,
)
from counterparty_unpack.messages.records import DecodeContext, Destroy
from counterparty_unpack.messages.text import memo_fields

# >QQ, followed by an optional tag
DESTROY_LENGTH = 16


def decode_destroy(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Destroy:
    """Decode a burn of an asset quantity with an optional free-form tag."""
    require_min_length(payload, DESTROY_LENGTH, "destroy")
    reader = ByteReader(payload)
    asset = read_asset(reader)
    quantity = reader.read_uint64()
    tag, tag_hex = memo_fields(reader.read_remaining())
    return Destroy(asset=asset, quantity=quantity, tag=tag, tag_hex=tag_hex)
