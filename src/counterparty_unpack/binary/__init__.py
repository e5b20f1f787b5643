"""Bounded byte and bit cursors."""

from .hexutil import (
    bytes_to_hex as bytes_to_hex,
)
from .hexutil import (
    ensure_bytes as ensure_bytes,
)
from .hexutil import (
    hex_to_bytes as hex_to_bytes,
)
from .reader import (
    BitReader as BitReader,
)
from .reader import (
    ByteReader as ByteReader,
)

__all__ = [
    "BitReader",
    "ByteReader",
    "bytes_to_hex",
    "ensure_bytes",
    "hex_to_bytes",
]
