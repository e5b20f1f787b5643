from counterparty_unpack.binary.reader import ByteReader
from counterparty_unpack.messages.common import (
    DEFAULT_CONTEXT,
    read_address,
    require_min_length,
)
from counterparty_unpack.messages.records import (
    SWEEP_FLAG_BINARY_MEMO,
    DecodeContext,
    Sweep,
)
from counterparty_unpack.messages.text import decode_utf8
from counterparty_unpack.protocol.address import PACKED_ADDRESS_LENGTH

# >21sB, followed by an optional memo
SWEEP_LENGTH = PACKED_ADDRESS_LENGTH + 1


def decode_sweep(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Sweep:
    """Decode a sweep of balances and/or asset ownership to one destination.

    Flag bit 4 marks the memo as binary, in which case only memo_hex is set;
    otherwise the memo must be valid UTF-8.
    """
    require_min_length(payload, SWEEP_LENGTH, "sweep")
    reader = ByteReader(payload)
    destination = read_address(reader, ctx)
    flags = reader.read_uint8()
    raw_memo = reader.read_remaining()

    memo = memo_hex = None
    if raw_memo:
        memo_hex = raw_memo.hex()
        if not flags & SWEEP_FLAG_BINARY_MEMO:
            memo = decode_utf8(raw_memo, "sweep memo")

    return Sweep(destination=destination, flags=flags, memo=memo, memo_hex=memo_hex)
