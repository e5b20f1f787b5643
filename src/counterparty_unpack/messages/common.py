"""Struct-level helpers shared by the decoders."""

from counterparty_unpack.binary.reader import ByteReader
from counterparty_unpack.errors import DecodeError
from counterparty_unpack.messages.records import DecodeContext
from counterparty_unpack.protocol.address import PACKED_ADDRESS_LENGTH, unpack_address
from counterparty_unpack.protocol.asset import asset_id_to_name

DEFAULT_CONTEXT = DecodeContext()


def require_exact_length(payload: bytes, expected: int, message: str) -> None:
    if not payload:
        raise DecodeError(f"Empty {message} payload")
    if len(payload) != expected:
        raise DecodeError(
            f"Invalid {message} length; expected {expected} bytes but got {len(payload)}"
        )


def require_min_length(payload: bytes, minimum: int, message: str) -> None:
    if not payload:
        raise DecodeError(f"Empty {message} payload")
    if len(payload) < minimum:
        raise DecodeError(
            f"{message.capitalize()} payload too short; expected at least "
            f"{minimum} bytes but got {len(payload)}"
        )


def read_asset(reader: ByteReader) -> str:
    return asset_id_to_name(reader.read_uint64())


def read_address(reader: ByteReader, ctx: DecodeContext) -> str:
    return unpack_address(reader.read_bytes(PACKED_ADDRESS_LENGTH), ctx.network)


def read_hash(reader: ByteReader) -> str:
    return reader.read_bytes(32).hex()
