"""Tests for the bounded byte and bit readers."""

import struct

import pytest

from counterparty_unpack.binary import BitReader, ByteReader
from counterparty_unpack.errors import DecodeError


class TestByteReader:
    """Byte-aligned reads and their bounds checks."""

    def test_reads_big_endian_integers(self):
        data = struct.pack(">BHIQ", 0xAB, 0x1234, 0xDEADBEEF, 2**64 - 1)
        reader = ByteReader(data)
        assert reader.read_uint8() == 0xAB
        assert reader.read_uint16() == 0x1234
        assert reader.read_uint32() == 0xDEADBEEF
        assert reader.read_uint64() == 2**64 - 1
        assert reader.at_end()

    def test_reads_floats(self):
        reader = ByteReader(struct.pack(">fd", 0.25, 1.5))
        assert reader.read_float32() == 0.25
        assert reader.read_float64() == 1.5

    def test_read_bool(self):
        reader = ByteReader(b"\x00\x01\x07")
        assert reader.read_bool() is False
        assert reader.read_bool() is True
        assert reader.read_bool() is True

    def test_peek_does_not_consume(self):
        reader = ByteReader(b"\x01\x02\x03")
        assert reader.peek(2) == b"\x01\x02"
        assert reader.offset == 0
        assert reader.remaining == 3

    def test_skip_and_read_remaining(self):
        reader = ByteReader(b"abcdef")
        reader.skip(2)
        assert reader.offset == 2
        assert reader.read_remaining() == b"cdef"
        assert reader.remaining == 0
        assert reader.read_remaining() == b""

    @pytest.mark.parametrize(
        ("method", "size"),
        [
            ("read_uint16", 1),
            ("read_uint32", 3),
            ("read_uint64", 7),
            ("read_float32", 3),
            ("read_float64", 7),
        ],
    )
    def test_over_read_raises(self, method, size):
        reader = ByteReader(b"\x00" * size)
        with pytest.raises(DecodeError, match="Unexpected end of data"):
            getattr(reader, method)()

    def test_failed_read_leaves_offset_unchanged(self):
        reader = ByteReader(b"\x00\x01\x02")
        reader.skip(1)
        with pytest.raises(DecodeError):
            reader.read_bytes(3)
        assert reader.offset == 1
        assert reader.read_bytes(2) == b"\x01\x02"

    def test_negative_length_rejected(self):
        with pytest.raises(DecodeError, match="Invalid read length"):
            ByteReader(b"\x00").read_bytes(-1)

    def test_peek_past_end_raises(self):
        with pytest.raises(DecodeError):
            ByteReader(b"").peek(1)

    def test_source_buffer_is_copied(self):
        source = bytearray(b"\x01\x02")
        reader = ByteReader(source)
        source[0] = 0xFF
        assert reader.read_uint8() == 1


class TestBitReader:
    """MSB-first bit reads at arbitrary alignment."""

    def test_reads_bits_msb_first(self):
        reader = BitReader(bytes([0b10110000]))
        assert [reader.read_bit() for _ in range(4)] == [1, 0, 1, 1]
        assert reader.bits_consumed == 4
        assert reader.bits_remaining == 4

    def test_read_bits_spans_bytes(self):
        reader = BitReader(bytes([0b00001111, 0b11110000]))
        reader.read_bits(4)
        assert reader.read_bits(8) == 0xFF
        assert reader.byte_offset == 1
        assert reader.bit_offset == 4

    def test_read_zero_bits(self):
        reader = BitReader(b"")
        assert reader.read_bits(0) == 0

    @pytest.mark.parametrize("count", [-1, 33])
    def test_read_bits_out_of_range(self, count):
        with pytest.raises(DecodeError, match="Invalid bit count"):
            BitReader(b"\x00" * 8).read_bits(count)

    def test_read_uint64_unaligned(self):
        value = 0x0123456789ABCDEF
        # One leading 1 bit, then the value, then 7 zero padding bits.
        packed = ((1 << 64 | value) << 7).to_bytes(9, "big")
        reader = BitReader(packed)
        assert reader.read_bit() == 1
        assert reader.read_uint64() == value
        assert reader.remaining_bits_are_zero()

    def test_read_bytes_aligned_and_unaligned(self):
        reader = BitReader(b"\xab\xcd")
        assert reader.read_bytes(1) == b"\xab"

        reader = BitReader(bytes([0b01010101, 0b10000000]))
        reader.read_bit()
        assert reader.read_bytes(1) == bytes([0b10101011])

    def test_over_read_raises(self):
        reader = BitReader(b"\xff")
        reader.read_bits(5)
        with pytest.raises(DecodeError, match="Unexpected end of bit stream"):
            reader.read_bits(4)

    def test_read_bytes_past_end_raises(self):
        reader = BitReader(b"\xff\xff")
        reader.read_bit()
        with pytest.raises(DecodeError):
            reader.read_bytes(2)

    def test_remaining_bits_are_zero(self):
        reader = BitReader(bytes([0b10000000, 0x00]))
        reader.read_bit()
        assert reader.remaining_bits_are_zero()

        reader = BitReader(bytes([0b10000001]))
        reader.read_bit()
        assert not reader.remaining_bits_are_zero()
        assert reader.bits_remaining == 7
