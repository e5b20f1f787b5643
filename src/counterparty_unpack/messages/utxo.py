"""UTXO-bound asset decoders: utxo move, attach and detach."""

from counterparty_unpack.errors import DecodeError
from counterparty_unpack.messages.common import DEFAULT_CONTEXT
from counterparty_unpack.messages.records import Attach, DecodeContext, Detach, UtxoMove
from counterparty_unpack.messages.text import parse_int_field, split_pipe_fields

# Sentinel for 'no explicit destination' in a detach.
NO_DESTINATION = "0"


def decode_utxo(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> UtxoMove:
    source, destination, asset, quantity = split_pipe_fields(payload, 4)
    if not source or not destination or not asset:
        raise DecodeError("UTXO move requires source, destination and asset")
    return UtxoMove(
        source=source,
        destination=destination,
        asset=asset,
        quantity=parse_int_field(quantity, "quantity"),
    )


def decode_attach(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Attach:
    """Decode 'asset|quantity|vout'; an empty vout leaves the output unset."""
    asset, quantity, vout = split_pipe_fields(payload, 3)
    if not asset:
        raise DecodeError("Attach requires an asset")
    return Attach(
        asset=asset,
        quantity=parse_int_field(quantity, "quantity"),
        destination_vout=parse_int_field(vout, "destination_vout") if vout else None,
    )


def decode_detach(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Detach:
    (destination,) = split_pipe_fields(payload, 1)
    if destination in ("", NO_DESTINATION):
        return Detach(destination=None)
    return Detach(destination=destination)
