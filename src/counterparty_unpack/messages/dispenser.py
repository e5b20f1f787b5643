"""Dispenser and dispense decoders."""

from counterparty_unpack.binary.reader import ByteReader
from counterparty_unpack.errors import DecodeError
from counterparty_unpack.messages.common import (
    DEFAULT_CONTEXT,
    read_address,
    read_asset,
    require_exact_length,
    require_min_length,
)
from counterparty_unpack.messages.records import (
    DISPENSER_STATUS_OPEN_EMPTY_ADDRESS,
    DecodeContext,
    Dispense,
    Dispenser,
)
from counterparty_unpack.protocol.address import PACKED_ADDRESS_LENGTH

# >QQQQB
DISPENSER_LENGTH = 33
DISPENSE_LENGTH = 1


def decode_dispenser(
    payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT
) -> Dispenser:
    """Decode a dispenser creation or status change.

    Layout is the fixed header, then a packed open address only when the
    status is 'open on empty address', then an optional packed oracle
    address. Trailing bytes that fit neither slot are rejected.

    Raises:
        DecodeError: On a short header or an unexpected trailer length.

    """
    require_min_length(payload, DISPENSER_LENGTH, "dispenser")
    reader = ByteReader(payload)
    asset = read_asset(reader)
    give_quantity = reader.read_uint64()
    escrow_quantity = reader.read_uint64()
    mainchainrate = reader.read_uint64()
    status = reader.read_uint8()

    open_address = None
    if status == DISPENSER_STATUS_OPEN_EMPTY_ADDRESS:
        if reader.remaining < PACKED_ADDRESS_LENGTH:
            raise DecodeError(
                "Dispenser with status 1 requires a packed open address"
            )
        open_address = read_address(reader, ctx)

    oracle_address = None
    if reader.remaining == PACKED_ADDRESS_LENGTH:
        oracle_address = read_address(reader, ctx)
    elif not reader.at_end():
        raise DecodeError(
            f"Invalid dispenser trailer; expected 0 or {PACKED_ADDRESS_LENGTH} "
            f"bytes but got {reader.remaining}"
        )

    return Dispenser(
        asset=asset,
        give_quantity=give_quantity,
        escrow_quantity=escrow_quantity,
        mainchainrate=mainchainrate,
        status=status,
        open_address=open_address,
        oracle_address=oracle_address,
    )


def decode_dispense(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Dispense:
    require_exact_length(payload, DISPENSE_LENGTH, "dispense")
    return Dispense(marker=payload[0])
