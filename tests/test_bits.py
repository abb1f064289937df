import numpy as np
import pytest

from zdex.bits import (BitSource, BitVector, FromU8, FromU16, FromU32, FromU64, FromU128,
                       SCALAR_TYPES, UnsignedScalar)


class TestUnsignedScalar:
    """Tests for the built-in scalar kinds."""

    def test_bit_indices_ascending(self):
        """Test that set bits are listed in ascending order."""
        assert list(FromU8(0b10000101).bit_indices()) == [0, 2, 7]

    def test_zero_has_no_set_bits(self):
        """Test that zero lists no bits."""
        assert list(FromU32(0).bit_indices()) == []

    def test_wide_kind(self):
        """Test the lowest and highest bit of a 128-bit value."""
        assert list(FromU128((1 << 127) | 1).bit_indices()) == [0, 127]

    def test_declared_widths(self):
        """Test the declared widths and the width lookup table."""
        assert [kind.bits for kind in (FromU8, FromU16, FromU32, FromU64, FromU128)] == [8, 16, 32, 64, 128]
        assert SCALAR_TYPES[64] is FromU64

    @pytest.mark.parametrize("value", [-1, 256])
    def test_out_of_range(self, value):
        """Test that values outside the declared width are rejected."""
        with pytest.raises(ValueError):
            FromU8(value)

    @pytest.mark.parametrize("value", [1.5, "3", True, None])
    def test_non_integer(self, value):
        """Test that non-integers and bools are rejected."""
        with pytest.raises(TypeError):
            FromU8(value)

    def test_numpy_integer_accepted(self):
        """Test construction from a numpy integer."""
        assert int(FromU16(np.uint16(513))) == 513

    def test_base_class_has_no_width(self):
        """Test that the unsized base kind cannot be constructed."""
        with pytest.raises(TypeError):
            UnsignedScalar(1)

    def test_equality_by_kind_and_value(self):
        """Test equality and hashing by kind and value."""
        assert FromU8(5) == FromU8(5)
        assert FromU8(5) != FromU16(5)
        assert len({FromU8(5), FromU8(5), FromU8(6)}) == 2

    def test_repr(self):
        """Test the binary repr."""
        assert repr(FromU8(5)) == "FromU8(0b101)"

    def test_is_bit_source(self):
        """Test that scalars implement the bit source interface."""
        assert isinstance(FromU8(1), BitSource)

    def test_bit_source_is_abstract(self):
        """Test that the interface itself cannot be instantiated."""
        with pytest.raises(TypeError):
            BitSource()


class TestBitVector:
    """Tests for the bit-vector container."""

    def test_construction_and_access(self):
        """Test construction from integers and indexed reads."""
        v = BitVector([1, 0, 1])
        assert len(v) == 3
        assert v[0] is True and v[1] is False
        assert list(v) == [True, False, True]
        assert v[-1] is True

    def test_from_string(self):
        """Test construction from a bit string."""
        assert BitVector('101') == [True, False, True]
        with pytest.raises(ValueError):
            BitVector('102')

    def test_zeros(self):
        """Test all-false construction."""
        assert BitVector.zeros(3) == [False, False, False]
        assert len(BitVector.zeros(0)) == 0

    def test_set_item(self):
        """Test writing a single position."""
        v = BitVector.zeros(4)
        v[2] = True
        assert str(v) == '0010'
        with pytest.raises(IndexError):
            v[4] = True

    def test_set_slice(self):
        """Test that slice assignment writes each value to its own position."""
        v = BitVector.zeros(3)
        v[0:2] = [False, True]
        assert str(v) == '010'
        v[1:] = (0, 1)
        assert str(v) == '001'

    def test_set_slice_length_mismatch(self):
        """Test that a slice assignment of the wrong length is rejected."""
        v = BitVector.zeros(3)
        with pytest.raises(ValueError):
            v[0:2] = [True, False, True]
        assert str(v) == '000'

    def test_slice_is_a_copy(self):
        """Test that reading a slice does not alias the vector."""
        v = BitVector('1100')
        head = v[:2]
        head[0] = False
        assert str(head) == '01'
        assert str(v) == '1100'

    def test_resize(self):
        """Test growing and truncating at the tail."""
        v = BitVector('11')
        v.resize(4)
        assert str(v) == '1100'
        v.resize(5, fill=True)
        assert str(v) == '11001'
        v.resize(1)
        assert str(v) == '1'
        with pytest.raises(ValueError):
            v.resize(-1)

    def test_equality(self):
        """Test equality against vectors and plain sequences."""
        assert BitVector('10') == BitVector([True, False])
        assert BitVector('10') != BitVector('100')
        assert BitVector('10') == (True, False)
        assert BitVector('10') != [True]
        assert BitVector('1') != "1"

    def test_unhashable(self):
        """Test that the mutable vector is unhashable."""
        with pytest.raises(TypeError):
            hash(BitVector('1'))

    def test_str_and_repr(self):
        """Test the bit-string rendering."""
        v = BitVector([True, False, True, True])
        assert str(v) == '1011'
        assert repr(v) == "BitVector('1011')"

    def test_to_numpy_is_a_copy(self):
        """Test that the exported array does not alias the vector."""
        v = BitVector('10')
        array = v.to_numpy()
        array[1] = True
        assert str(v) == '10'


class TestBitVectorChunks:
    """Tests for packing bit vectors into integers."""

    def test_to_bytes_pads_low_end(self):
        """Test that the last byte is padded at its low end."""
        assert BitVector('101').to_bytes() == b'\xa0'
        assert BitVector('111111111').to_bytes() == b'\xff\x80'

    def test_chunks_8(self):
        """Test 8-bit chunks."""
        assert BitVector('1').to_chunks(8) == [0x80]
        assert BitVector('1' * 9).to_chunks(8) == [0xff, 0x80]

    def test_chunks_16(self):
        """Test a 16-bit chunk."""
        assert BitVector('1' + '0' * 14 + '1').to_chunks(16) == [0x8001]

    def test_chunks_64(self):
        """Test 64-bit chunks spilling into a second chunk."""
        assert BitVector('1' + '0' * 64).to_chunks() == [1 << 63, 0]

    def test_chunks_of_empty_vector(self):
        """Test that an empty vector has no chunks."""
        assert BitVector().to_chunks(32) == []

    def test_invalid_chunk_width(self):
        """Test that an unsupported chunk width is rejected."""
        with pytest.raises(ValueError):
            BitVector('1').to_chunks(12)

    def test_chunks_follow_bit_order(self):
        """Test that chunk lists of equal-length vectors order like the bits."""
        low = BitVector('0111' * 5)
        high = BitVector('1000' + '0' * 16)
        assert low.to_chunks(8) < high.to_chunks(8)

    def test_to_int(self):
        """Test reading the vector as one integer."""
        assert BitVector('101').to_int() == 5
        assert BitVector('1' + '0' * 70).to_int() == 1 << 70
        assert BitVector().to_int() == 0
