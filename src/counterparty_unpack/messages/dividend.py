from counterparty_unpack.binary.reader import ByteReader
from counterparty_unpack.errors import DecodeError
from counterparty_unpack.messages.common import DEFAULT_CONTEXT, read_asset
from counterparty_unpack.messages.records import DecodeContext, Dividend
from counterparty_unpack.protocol.asset import XCP

# >QQQ
DIVIDEND_LENGTH = 24
# >QQ, dividends paid in XCP only
LEGACY_DIVIDEND_LENGTH = 16


def decode_dividend(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Dividend:
    """Decode a dividend, accepting the legacy form without a dividend asset."""
    if not payload:
        raise DecodeError("Empty dividend payload")
    if len(payload) not in (DIVIDEND_LENGTH, LEGACY_DIVIDEND_LENGTH):
        raise DecodeError(
            f"Invalid dividend length; expected {DIVIDEND_LENGTH} or "
            f"{LEGACY_DIVIDEND_LENGTH} bytes but got {len(payload)}"
        )

    reader = ByteReader(payload)
    quantity_per_unit = reader.read_uint64()
    asset = read_asset(reader)
    dividend_asset = read_asset(reader) if not reader.at_end() else XCP
    return Dividend(
        asset=asset,
        quantity_per_unit=quantity_per_unit,
        dividend_asset=dividend_asset,
    )
