from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

import numpy as np

CHUNK_WIDTHS = (8, 16, 32, 64)


# --- Scalar bit sources ---

class BitSource(ABC):
    """
    Abstract base class for values that can be Z-indexed.
    A bit source only has to enumerate the positions of its set bits; no fixed width is assumed.
    """
    @abstractmethod
    def bit_indices(self) -> Iterator[int]:
        """Yields the indices of the set bits in ascending order."""
        pass


class UnsignedScalar(BitSource):
    """
    An unsigned integer with a declared storage width.
    The width only bounds construction. Encoding derives the width from the highest set bit.
    """
    bits = None

    def __init__(self, value: int):
        if self.bits is None:
            raise TypeError(f"{type(self).__name__} has no declared width; use a sized kind such as FromU32")
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"{type(self).__name__} expects an integer, got {type(value).__name__}")
        value = int(value)
        if not 0 <= value < (1 << self.bits):
            raise ValueError(f"{value} does not fit in {self.bits} unsigned bits")
        self.value = value

    def bit_indices(self) -> Iterator[int]:
        value = self.value
        for i in range(value.bit_length()):
            if value >> i & 1:
                yield i

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other):
        if not isinstance(other, UnsignedScalar):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __repr__(self):
        return f"{type(self).__name__}({self.value:#b})"


class FromU8(UnsignedScalar):
    bits = 8


class FromU16(UnsignedScalar):
    bits = 16


class FromU32(UnsignedScalar):
    bits = 32


class FromU64(UnsignedScalar):
    bits = 64


class FromU128(UnsignedScalar):
    bits = 128


SCALAR_TYPES = {kind.bits: kind for kind in (FromU8, FromU16, FromU32, FromU64, FromU128)}


# --- Bit-vector container ---

class BitVector:
    """
    A resizable sequence of booleans, most significant bit first.

    Backed by a numpy bool array. Besides list-like access it can be packed into
    fixed-width unsigned chunks, which is the form a Z-index takes as a storage key.
    """
    __hash__ = None

    def __init__(self, bits: Iterable = ()):
        if isinstance(bits, str):
            if set(bits) - {'0', '1'}:
                raise ValueError(f"bit string may only contain '0' and '1': {bits!r}")
            bits = [c == '1' for c in bits]
        elif not isinstance(bits, np.ndarray):
            bits = [bool(b) for b in bits]
        self._bits = np.array(bits, dtype=bool).reshape(-1)

    @classmethod
    def zeros(cls, length: int) -> "BitVector":
        return cls._from_array(np.zeros(length, dtype=bool))

    @classmethod
    def _from_array(cls, array: np.ndarray) -> "BitVector":
        vector = cls.__new__(cls)
        vector._bits = array
        return vector

    def to_numpy(self) -> np.ndarray:
        """Returns a copy of the bits as a numpy bool array."""
        return self._bits.copy()

    def resize(self, length: int, fill: bool = False):
        """Truncates or extends the vector at its tail."""
        if length < 0:
            raise ValueError("length must be non-negative")
        current = len(self._bits)
        if length <= current:
            self._bits = self._bits[:length].copy()
        else:
            self._bits = np.concatenate([self._bits, np.full(length - current, bool(fill))])

    def __len__(self):
        return len(self._bits)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return BitVector._from_array(self._bits[index].copy())
        return bool(self._bits[index])

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            self._bits[index] = np.asarray(value, dtype=bool)
        else:
            self._bits[index] = bool(value)

    def __iter__(self):
        return (bool(b) for b in self._bits)

    def __eq__(self, other):
        if isinstance(other, BitVector):
            return np.array_equal(self._bits, other._bits)
        if isinstance(other, (list, tuple)):
            return len(other) == len(self._bits) and all(bool(a) == b for a, b in zip(other, self))
        return NotImplemented

    def __str__(self):
        return ''.join('1' if b else '0' for b in self._bits)

    def __repr__(self):
        return f"BitVector('{self}')"

    def _padded(self, multiple: int) -> np.ndarray:
        n = len(self._bits)
        padded = np.zeros(-(-n // multiple) * multiple, dtype=bool)
        padded[:n] = self._bits
        return padded

    def to_bytes(self) -> bytes:
        """Packs the bits big-endian; the last byte is zero-padded at its low end."""
        return np.packbits(self._bits, bitorder='big').tobytes()

    def to_chunks(self, chunk_bits: int = 64) -> list[int]:
        """
        Splits the vector into unsigned integers of chunk_bits each, most significant first.
        The final chunk is zero-padded at its low end, so chunk lists order the same way
        as equal-length bit vectors.
        """
        if chunk_bits not in CHUNK_WIDTHS:
            raise ValueError(f"chunk_bits must be one of {CHUNK_WIDTHS}, got {chunk_bits}")
        if not len(self._bits):
            return []
        packed = np.packbits(self._padded(chunk_bits), bitorder='big')
        return [int(c) for c in packed.view(np.dtype(f'>u{chunk_bits // 8}'))]

    def to_int(self) -> int:
        """Reads the whole vector as one unsigned integer, first bit most significant."""
        data = self.to_bytes()
        return int.from_bytes(data, 'big') >> (len(data) * 8 - len(self._bits))
