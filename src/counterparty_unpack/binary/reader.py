"""Bounded sequential readers over byte buffers."""

import struct

from counterparty_unpack.errors import DecodeError

_UINT16 = struct.Struct(">H")
_UINT32 = struct.Struct(">I")
_UINT64 = struct.Struct(">Q")
_FLOAT32 = struct.Struct(">f")
_FLOAT64 = struct.Struct(">d")


class ByteReader:
    """Byte-aligned big-endian reader.

    Every read is checked against the remaining length first; a read that
    would run past the end raises DecodeError and leaves the offset untouched.
    """

    def __init__(self, data: bytes):
        """Initializes the ByteReader.

        Args:
            data (bytes): The buffer to read from. Copied into an immutable
                bytes object so the caller may reuse its buffer.

        """
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Number of bytes left to read."""
        return len(self._data) - self._offset

    def at_end(self) -> bool:
        """Check if every byte has been consumed."""
        return self._offset == len(self._data)

    def _require(self, n: int) -> None:
        if n < 0:
            raise DecodeError(f"Invalid read length; expected >=0 but got {n}")
        if n > self.remaining:
            raise DecodeError(
                f"Unexpected end of data; wanted {n} bytes at offset "
                f"{self._offset} but only {self.remaining} remain"
            )

    def peek(self, n: int) -> bytes:
        """Return the next n bytes without consuming them."""
        self._require(n)
        return self._data[self._offset : self._offset + n]

    def skip(self, n: int) -> None:
        """Consume n bytes without returning them."""
        self._require(n)
        self._offset += n

    def read_bytes(self, n: int) -> bytes:
        """Consume and return the next n bytes."""
        self._require(n)
        start = self._offset
        self._offset += n
        return self._data[start : self._offset]

    def read_remaining(self) -> bytes:
        """Consume and return everything left in the buffer."""
        return self.read_bytes(self.remaining)

    def read_uint8(self) -> int:
        return self.read_bytes(1)[0]

    def read_bool(self) -> bool:
        return self.read_uint8() != 0

    def read_uint16(self) -> int:
        return _UINT16.unpack(self.read_bytes(2))[0]

    def read_uint32(self) -> int:
        return _UINT32.unpack(self.read_bytes(4))[0]

    def read_uint64(self) -> int:
        return _UINT64.unpack(self.read_bytes(8))[0]

    def read_float32(self) -> float:
        return _FLOAT32.unpack(self.read_bytes(4))[0]

    def read_float64(self) -> float:
        return _FLOAT64.unpack(self.read_bytes(8))[0]


class BitReader:
    """MSB-first reader addressable at bit granularity.

    Tracks the byte offset and the bit offset within that byte together so
    that byte reads work at any alignment.
    """

    MAX_BITS_PER_READ = 32

    def __init__(self, data: bytes):
        """Initializes the BitReader.

        Args:
            data (bytes): The buffer to read from.

        """
        self._data = bytes(data)
        self._byte_offset = 0
        self._bit_offset = 0

    @property
    def byte_offset(self) -> int:
        return self._byte_offset

    @property
    def bit_offset(self) -> int:
        return self._bit_offset

    @property
    def bits_consumed(self) -> int:
        return self._byte_offset * 8 + self._bit_offset

    @property
    def bits_remaining(self) -> int:
        return len(self._data) * 8 - self.bits_consumed

    def _require_bits(self, n: int) -> None:
        if n > self.bits_remaining:
            raise DecodeError(
                f"Unexpected end of bit stream; wanted {n} bits at bit "
                f"{self.bits_consumed} but only {self.bits_remaining} remain"
            )

    def read_bit(self) -> int:
        """Consume a single bit and return it as 0 or 1."""
        self._require_bits(1)
        byte = self._data[self._byte_offset]
        bit = (byte >> (7 - self._bit_offset)) & 1
        self._bit_offset += 1
        if self._bit_offset == 8:
            self._bit_offset = 0
            self._byte_offset += 1
        return bit

    def read_bool(self) -> bool:
        return self.read_bit() == 1

    def read_bits(self, n: int) -> int:
        """Consume n bits (0 to 32) and return them as an unsigned integer.

        Args:
            n (int): Number of bits to read. Zero reads nothing and returns 0.

        Raises:
            DecodeError: If n is out of range or the stream is too short.

        """
        if not (0 <= n <= self.MAX_BITS_PER_READ):
            raise DecodeError(
                f"Invalid bit count; expected 0..{self.MAX_BITS_PER_READ} but got {n}"
            )
        self._require_bits(n)
        value = 0
        for _ in range(n):
            value = (value << 1) | self.read_bit()
        return value

    def read_uint64(self) -> int:
        """Consume 64 bits as a big-endian unsigned integer."""
        self._require_bits(64)
        high = self.read_bits(32)
        low = self.read_bits(32)
        return (high << 32) | low

    def read_bytes(self, n: int) -> bytes:
        """Consume n whole bytes at the current (possibly unaligned) position."""
        if n < 0:
            raise DecodeError(f"Invalid read length; expected >=0 but got {n}")
        self._require_bits(n * 8)
        if self._bit_offset == 0:
            start = self._byte_offset
            self._byte_offset += n
            return self._data[start : self._byte_offset]
        return bytes(self.read_bits(8) for _ in range(n))

    def remaining_bits_are_zero(self) -> bool:
        """Check that every unread bit is zero, without consuming anything."""
        if self.bits_remaining == 0:
            return True
        if self._bit_offset:
            mask = (1 << (8 - self._bit_offset)) - 1
            if self._data[self._byte_offset] & mask:
                return False
            start = self._byte_offset + 1
        else:
            start = self._byte_offset
        return not any(self._data[start:])
