"""External field-name spellings, resolved at the comparison boundary.

Descriptions come from several generations of API, so the same field may be
spelled in snake_case, camelCase, or under an older name entirely. Each
canonical field lists its accepted spellings in lookup order.
"""

from collections.abc import Mapping

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "asset": ("asset", "asset_name", "assetName"),
    "destination": ("destination", "address"),
    "give_asset": ("give_asset", "giveAsset"),
    "give_quantity": ("give_quantity", "giveQuantity"),
    "get_asset": ("get_asset", "getAsset"),
    "get_quantity": ("get_quantity", "getQuantity"),
    "fee_required": ("fee_required", "feeRequired"),
    "escrow_quantity": ("escrow_quantity", "escrowQuantity"),
    "mainchainrate": ("mainchainrate", "satoshirate", "mainchainRate"),
    "open_address": ("open_address", "openAddress"),
    "oracle_address": ("oracle_address", "oracleAddress"),
    "offer_hash": ("offer_hash", "offerHash", "tx_hash", "txHash"),
    "order_match_id": ("order_match_id", "orderMatchId"),
    "lock": ("lock", "locked"),
    "fee_fraction_int": ("fee_fraction_int", "fee_fraction", "feeFractionInt"),
    "quantity_per_unit": ("quantity_per_unit", "quantityPerUnit"),
    "dividend_asset": ("dividend_asset", "dividendAsset"),
    "sends": ("sends", "destinations"),
    "quantity_by_price": ("quantity_by_price", "quantityByPrice"),
    "hard_cap": ("hard_cap", "hardCap"),
    "max_mint_per_tx": ("max_mint_per_tx", "maxMintPerTx"),
    "lock_quantity": ("lock_quantity", "lockQuantity"),
    "lock_description": ("lock_description", "lockDescription"),
    "destination_vout": ("destination_vout", "destinationVout"),
    "wager_quantity": ("wager_quantity", "wagerQuantity"),
    "counterwager_quantity": ("counterwager_quantity", "counterwagerQuantity"),
    "target_value": ("target_value", "targetValue"),
    "bet_type": ("bet_type", "betType"),
}


def aliases_for(field: str) -> tuple[str, ...]:
    return FIELD_ALIASES.get(field, (field,))


def lookup(data: Mapping[str, object], field: str) -> object | None:
    """Return the first non-null value stored under any spelling of field."""
    for key in aliases_for(field):
        value = data.get(key)
        if value is not None:
            return value
    return None
