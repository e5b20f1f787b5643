"""Immutable records produced by the per-type decoders.

Quantities are plain Python ints so values beyond 2^53 survive exactly. The
only floats are fields that the wire format itself stores as IEEE floats.
"""

from msgspec import Struct

from counterparty_unpack.protocol.constants import Network


class DecodeContext(Struct, frozen=True):
    """Per-call inputs a decoder may need beyond the payload bytes."""

    type_id: int = -1
    network: Network = Network.MAINNET


class Send(Struct, frozen=True):
    asset: str
    quantity: int


class EnhancedSend(Struct, frozen=True):
    asset: str
    quantity: int
    destination: str
    memo: str | None = None
    memo_hex: str | None = None


class MpmaSendItem(Struct, frozen=True):
    """A single recipient inside a multi-asset send."""

    asset: str
    destination: str
    quantity: int
    memo: str | None = None
    memo_is_hex: bool = False


class MpmaSend(Struct, frozen=True):
    sends: tuple[MpmaSendItem, ...]
    memo: str | None = None
    memo_is_hex: bool = False

    @property
    def destinations(self) -> tuple[str, ...]:
        return tuple(item.destination for item in self.sends)


SWEEP_FLAG_BALANCES = 1
SWEEP_FLAG_OWNERSHIP = 2
SWEEP_FLAG_BINARY_MEMO = 4


class Sweep(Struct, frozen=True):
    destination: str
    flags: int
    memo: str | None = None
    memo_hex: str | None = None

    @property
    def sweep_balances(self) -> bool:
        return bool(self.flags & SWEEP_FLAG_BALANCES)

    @property
    def sweep_ownership(self) -> bool:
        return bool(self.flags & SWEEP_FLAG_OWNERSHIP)

    @property
    def memo_is_binary(self) -> bool:
        return bool(self.flags & SWEEP_FLAG_BINARY_MEMO)


class Order(Struct, frozen=True):
    give_asset: str
    give_quantity: int
    get_asset: str
    get_quantity: int
    expiration: int
    fee_required: int


class BtcPay(Struct, frozen=True):
    tx0_hash: str
    tx1_hash: str

    @property
    def order_match_id(self) -> str:
        return f"{self.tx0_hash}_{self.tx1_hash}"


DISPENSER_STATUS_OPEN = 0
DISPENSER_STATUS_OPEN_EMPTY_ADDRESS = 1
DISPENSER_STATUS_CLOSED = 10
DISPENSER_STATUS_CLOSING = 11


class Dispenser(Struct, frozen=True):
    asset: str
    give_quantity: int
    escrow_quantity: int
    mainchainrate: int
    status: int
    open_address: str | None = None
    oracle_address: str | None = None


class Dispense(Struct, frozen=True):
    marker: int


class Issuance(Struct, frozen=True):
    asset: str
    quantity: int
    divisible: bool
    lock: bool = False
    reset: bool = False
    callable: bool = False
    call_date: int = 0
    call_price: float = 0.0
    subasset_longname: str | None = None
    description: str | None = None


class Broadcast(Struct, frozen=True):
    timestamp: int
    value: float
    fee_fraction_int: int
    text: str


class Bet(Struct, frozen=True):
    bet_type: int
    deadline: int
    wager_quantity: int
    counterwager_quantity: int
    target_value: float
    leverage: int
    expiration: int


class Dividend(Struct, frozen=True):
    asset: str
    quantity_per_unit: int
    dividend_asset: str


class Cancel(Struct, frozen=True):
    offer_hash: str


class Fairminter(Struct, frozen=True):
    asset: str
    asset_parent: str
    price: int
    quantity_by_price: int
    max_mint_per_tx: int
    hard_cap: int
    premint_quantity: int
    start_block: int
    end_block: int
    soft_cap: int
    soft_cap_deadline_block: int
    minted_asset_commission_int: int
    burn_payment: bool
    lock_description: bool
    lock_quantity: bool
    divisible: bool
    description: str


class Fairmint(Struct, frozen=True):
    asset: str
    quantity: int


class UtxoMove(Struct, frozen=True):
    source: str
    destination: str
    asset: str
    quantity: int


class Attach(Struct, frozen=True):
    asset: str
    quantity: int
    destination_vout: int | None = None


class Detach(Struct, frozen=True):
    destination: str | None = None


class Destroy(Struct, frozen=True):
    asset: str
    quantity: int
    tag: str | None = None
    tag_hex: str | None = None


DecodedRecord = (
    Send
    | EnhancedSend
    | MpmaSend
    | Sweep
    | Order
    | BtcPay
    | Dispenser
    | Dispense
    | Issuance
    | Broadcast
    | Bet
    | Dividend
    | Cancel
    | Fairminter
    | Fairmint
    | UtxoMove
    | Attach
    | Detach
    | Destroy
)
