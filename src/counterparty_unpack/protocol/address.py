"""Packed address codec.

Messages carry destinations as 21 bytes:

    - Legacy (P2PKH / P2SH): base58check version byte + 20-byte hash. The
      version byte itself selects the network (0x00 / 0x05 on mainnet,
      0x6f / 0xc4 on testnet).
    - Segwit: 0x80 + witness version, then a 20-byte witness program. The
      human-readable part (bc / tb / bcrt) comes from the configured network.

Taproot programs are 32 bytes and are truncated to 20 when packed, so a
packed taproot address cannot be expanded back to the original.
"""

import base58
import bech32

from counterparty_unpack.errors import AddressError
from counterparty_unpack.protocol.constants import Network

PACKED_ADDRESS_LENGTH = 21
HASH_LENGTH = 20

SEGWIT_MARKER = 0x80
MAX_WITNESS_VERSION = 0x0F

_BECH32_HRPS = frozenset(network.bech32_hrp for network in Network)


def is_segwit_packed(packed: bytes) -> bool:
    return (
        len(packed) >= 1
        and SEGWIT_MARKER <= packed[0] <= SEGWIT_MARKER + MAX_WITNESS_VERSION
    )


def witness_version(packed: bytes) -> int:
    """Return the witness version of a packed segwit address, or -1."""
    if not is_segwit_packed(packed):
        return -1
    return packed[0] - SEGWIT_MARKER


def unpack_address(packed: bytes, network: Network = Network.MAINNET) -> str:
    """Convert a 21-byte packed address to its textual form.

    Args:
        packed (bytes): The packed address.
        network (Network): Selects the bech32 prefix for segwit addresses.
            Legacy addresses ignore it.

    Raises:
        AddressError: If the packed form has the wrong length or cannot be encoded.

    """
    if len(packed) != PACKED_ADDRESS_LENGTH:
        raise AddressError(
            f"Invalid packed address length; expected {PACKED_ADDRESS_LENGTH} "
            f"but got {len(packed)}"
        )

    body = bytes(packed[1:])
    if is_segwit_packed(packed):
        encoded = bech32.encode(network.bech32_hrp, witness_version(packed), body)
        if encoded is None:
            raise AddressError(f"Unencodable segwit address: {bytes(packed).hex()}")
        return encoded

    return base58.b58encode_check(bytes(packed[:1]) + body).decode("ascii")


def _pack_segwit(address: str) -> bytes:
    hrp = address[: address.rfind("1")].lower()
    if hrp not in _BECH32_HRPS:
        raise AddressError(f"Unsupported bech32 prefix: {hrp!r}")

    version, program = bech32.decode(hrp, address)
    if version is None:
        raise AddressError(f"Invalid bech32 address: {address}")
    if len(program) not in (HASH_LENGTH, 32):
        raise AddressError(f"Unsupported witness program length: {len(program)}")

    return bytes([SEGWIT_MARKER + version]) + bytes(program[:HASH_LENGTH])


def _pack_base58(address: str) -> bytes:
    try:
        payload = base58.b58decode_check(address)
    except ValueError as exc:
        raise AddressError(f"Invalid base58check address: {exc}") from exc

    if len(payload) != PACKED_ADDRESS_LENGTH:
        raise AddressError(f"Invalid hash length: {len(payload) - 1}")
    if is_segwit_packed(payload):
        raise AddressError(f"Base58 version byte collides with segwit marker: {payload[0]:#x}")
    return payload


def pack_address(address: str) -> bytes:
    """Convert a textual address to the 21-byte packed form.

    Raises:
        AddressError: If the address is empty, malformed or of an unsupported kind.

    """
    if not isinstance(address, str) or not address:
        raise AddressError("Address is required")

    lowered = address.lower()
    if any(lowered.startswith(hrp + "1") for hrp in _BECH32_HRPS):
        return _pack_segwit(address)
    return _pack_base58(address)


def addresses_equal(left: str, right: str) -> bool:
    """Compare two addresses by their packed canonical form.

    Unparseable addresses only compare equal when the strings are identical.
    """
    if left == right:
        return True
    try:
        return pack_address(left) == pack_address(right)
    except AddressError:
        return False
