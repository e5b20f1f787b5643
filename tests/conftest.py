import struct

import pytest

from counterparty_unpack.protocol import PREFIX, asset_name_to_id, pack_address

# Testnet P2PKH addresses and their hash160s.
TESTNET_ADDRESSES = (
    ("mn6q3dS2EnDUx3bmyWc6D4szJNVGtaR7zc", "4838d8b3588c4c7ba7c1d06f866e9b3739c63037"),
    ("mtQheFaSfWELRB2MyMBaiWjdDm6ux9Ezns", "8d6ae8a3b381663118b4e1eff4cfc7d0954dd6ec"),
    ("mnfAHmddVibnZNSkh8DvKaQoiEfNsxjXzH", "4e5638a01efbb2f292481797ae1dcfcdaeb98d00"),
)

MAINNET_P2PKH = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
MAINNET_P2PKH_HASH = "62e907b15cbf27d5425399ebf6f0fb50ebb88f18"
MAINNET_P2WPKH = "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"
MAINNET_P2WPKH_PROGRAM = "751e76e8199196d454941c45d1b3a323f1433bd6"


def pytest_configure(config: pytest.Config) -> None:
    """Register shared markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def addresses() -> list[str]:
    """Three distinct testnet addresses."""
    return [address for address, _ in TESTNET_ADDRESSES]


@pytest.fixture
def address_hashes() -> list[str]:
    return [hash160 for _, hash160 in TESTNET_ADDRESSES]


@pytest.fixture
def packed_addresses(addresses) -> list[bytes]:
    return [pack_address(address) for address in addresses]


@pytest.fixture
def mainnet_vectors() -> dict[str, str]:
    """Mainnet legacy and segwit addresses with their 20-byte payloads."""
    return {
        "p2pkh": MAINNET_P2PKH,
        "p2pkh_hash": MAINNET_P2PKH_HASH,
        "p2wpkh": MAINNET_P2WPKH,
        "p2wpkh_program": MAINNET_P2WPKH_PROGRAM,
    }


@pytest.fixture
def message():
    """Build a full message from a type id and payload.

    Ids below 256 use the 1-byte form unless legacy=True, which writes the
    4-byte big-endian form.
    """

    def build(type_id: int, payload: bytes, legacy: bool = False) -> bytes:
        if legacy or type_id == 0:
            return PREFIX + struct.pack(">I", type_id) + payload
        return PREFIX + bytes([type_id]) + payload

    return build


@pytest.fixture
def asset_id():
    return asset_name_to_id
