"""Fair launch decoders: fairminter (launch definition) and fairmint (mint)."""

from counterparty_unpack.errors import DecodeError
from counterparty_unpack.messages.common import DEFAULT_CONTEXT
from counterparty_unpack.messages.negotiate import negotiate, probe_compact
from counterparty_unpack.messages.records import DecodeContext, Fairmint, Fairminter
from counterparty_unpack.messages.text import (
    parse_bool_field,
    parse_int_field,
    split_pipe_fields,
)

FAIRMINTER_FIELD_COUNT = 17
FAIRMINT_FIELD_COUNT = 2

_FAIRMINTER_INT_FIELDS = (
    "price",
    "quantity_by_price",
    "max_mint_per_tx",
    "hard_cap",
    "premint_quantity",
    "start_block",
    "end_block",
    "soft_cap",
    "soft_cap_deadline_block",
    "minted_asset_commission_int",
)
_FAIRMINTER_BOOL_FIELDS = (
    "burn_payment",
    "lock_description",
    "lock_quantity",
    "divisible",
)


def decode_fairminter_legacy(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Fairminter:
    """Decode the pipe-delimited fairminter form.

    Fields, in order: asset, asset_parent, the ten integer fields, the four
    0/1 flags, then the description. The description is free text and may
    itself contain '|'.
    """
    fields = split_pipe_fields(payload, FAIRMINTER_FIELD_COUNT, free_text_last=True)
    asset, asset_parent = fields[0], fields[1]
    if not asset:
        raise DecodeError("Fairminter requires an asset")
    ints = fields[2:12]
    bools = fields[12:16]

    values: dict = {
        name: parse_int_field(text, name)
        for name, text in zip(_FAIRMINTER_INT_FIELDS, ints)
    }
    values.update(
        {
            name: parse_bool_field(text, name)
            for name, text in zip(_FAIRMINTER_BOOL_FIELDS, bools)
        }
    )
    return Fairminter(
        asset=asset,
        asset_parent=asset_parent,
        description=fields[16],
        **values,
    )


def decode_fairmint_legacy(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Fairmint:
    """Decode 'asset|quantity'; an empty quantity means the default mint."""
    asset, quantity = split_pipe_fields(payload, FAIRMINT_FIELD_COUNT)
    if not asset:
        raise DecodeError("Fairmint requires an asset")
    return Fairmint(
        asset=asset,
        quantity=parse_int_field(quantity, "quantity", allow_empty=True),
    )


def decode_fairminter(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Fairminter:
    return negotiate(payload, ctx, probe_compact, decode_fairminter_legacy)


def decode_fairmint(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Fairmint:
    return negotiate(payload, ctx, probe_compact, decode_fairmint_legacy)
