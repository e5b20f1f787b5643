"""Multi-peer multi-asset (MPMA) send decoder.

Wire layout::

    >H            address table size N (N >= 1)
    N * 21 bytes  packed addresses
    bit stream    [memo] (1 group)+ 0 padding

where a memo is ``present:1 [is_hex:1 length:6 bytes:length]``, a group is
``more:1=1 asset:64 count-1:W (index:W amount:64 [memo])*count`` and W is
``ceil(log2(N))``, zero for a single-entry table.
"""

from counterparty_unpack.binary.reader import BitReader, ByteReader
from counterparty_unpack.errors import DecodeError
from counterparty_unpack.messages.common import DEFAULT_CONTEXT, require_min_length
from counterparty_unpack.messages.records import DecodeContext, MpmaSend, MpmaSendItem
from counterparty_unpack.messages.text import decode_utf8
from counterparty_unpack.protocol.address import PACKED_ADDRESS_LENGTH, unpack_address
from counterparty_unpack.protocol.asset import asset_id_to_name

TABLE_SIZE_LENGTH = 2
MEMO_LENGTH_BITS = 6


def index_width(table_size: int) -> int:
    """Bits needed to index a table of the given size."""
    return (table_size - 1).bit_length()


def _read_address_table(reader: ByteReader, ctx: DecodeContext) -> list[str]:
    table_size = reader.read_uint16()
    if table_size == 0:
        raise DecodeError("MPMA address table is empty")
    if reader.remaining < table_size * PACKED_ADDRESS_LENGTH:
        raise DecodeError(
            f"MPMA address table truncated; {table_size} entries need "
            f"{table_size * PACKED_ADDRESS_LENGTH} bytes but only "
            f"{reader.remaining} remain"
        )
    return [
        unpack_address(reader.read_bytes(PACKED_ADDRESS_LENGTH), ctx.network)
        for _ in range(table_size)
    ]


def _read_memo(bits: BitReader) -> tuple[str, bool] | None:
    if not bits.read_bool():
        return None
    is_hex = bits.read_bool()
    raw = bits.read_bytes(bits.read_bits(MEMO_LENGTH_BITS))
    if is_hex:
        return raw.hex(), True
    return decode_utf8(raw, "mpma memo"), False


def decode_mpma(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> MpmaSend:
    """Decode an MPMA send into its recipients, flattened in wire order.

    A recipient without its own memo inherits the global memo, if any.

    Raises:
        DecodeError: On an empty table, a truncated stream, an address index
            outside the table, or non-zero trailing bits.

    """
    require_min_length(payload, TABLE_SIZE_LENGTH, "mpma")
    reader = ByteReader(payload)
    addresses = _read_address_table(reader, ctx)
    width = index_width(len(addresses))

    bits = BitReader(reader.read_remaining())
    global_memo = _read_memo(bits)

    sends = []
    while bits.read_bool():
        asset = asset_id_to_name(bits.read_uint64())
        recipient_count = bits.read_bits(width) + 1
        for _ in range(recipient_count):
            index = bits.read_bits(width)
            if index >= len(addresses):
                raise DecodeError(
                    f"MPMA address index out of range; table has "
                    f"{len(addresses)} entries but got index {index}"
                )
            quantity = bits.read_uint64()
            memo = _read_memo(bits) or global_memo
            sends.append(
                MpmaSendItem(
                    asset=asset,
                    destination=addresses[index],
                    quantity=quantity,
                    memo=memo[0] if memo else None,
                    memo_is_hex=memo[1] if memo else False,
                )
            )

    if not sends:
        raise DecodeError("MPMA send has no asset groups")
    if bits.bits_remaining >= 8 or not bits.remaining_bits_are_zero():
        raise DecodeError(
            f"MPMA trailing data after terminator; {bits.bits_remaining} bits remain"
        )

    return MpmaSend(
        sends=tuple(sends),
        memo=global_memo[0] if global_memo else None,
        memo_is_hex=global_memo[1] if global_memo else False,
    )
