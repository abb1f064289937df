import logging
from collections.abc import Iterable

import numpy as np

from .bits import BitSource, BitVector

logger = logging.getLogger(__name__)


# --- Canonical Encoder ---

def canonical_bits(scalar: BitSource) -> BitVector:
    """
    Converts one scalar into its minimal most-significant-bit-first bit vector.

    The length is highest set bit + 1, regardless of the scalar's declared storage width.
    A scalar with no set bits yields [False].
    """
    indices = np.fromiter(scalar.bit_indices(), dtype=np.int64)
    highest = int(indices.max()) if indices.size else -1

    bits = np.zeros(highest + 1 if highest >= 0 else 1, dtype=bool)
    # Bit index 0 maps to the last position
    bits[len(bits) - 1 - indices] = True
    return BitVector._from_array(bits)


# --- Width Aligner ---

def align_widths(sequences: list[BitVector]) -> list[BitVector]:
    """
    Zero-extends every sequence at its leading end to the width of the longest one.
    The original bits stay anchored to the least significant end.
    """
    if not sequences:
        return []
    width = max(len(seq) for seq in sequences)

    aligned = []
    for seq in sequences:
        missing = width - len(seq)
        if missing == 0:
            aligned.append(seq)
            continue
        bits = np.zeros(width, dtype=bool)
        bits[missing:] = seq.to_numpy()
        aligned.append(BitVector._from_array(bits))
    return aligned


# --- Interleaver ---

def interleave(aligned: list[BitVector]) -> BitVector:
    """
    Weaves equal-length sequences into one, most significant level first.
    Position level * N + j of the result holds bit `level` of sequence j.
    """
    if not aligned:
        return BitVector()
    if len(aligned) == 1:
        return aligned[0]
    width = len(aligned[0])
    if any(len(seq) != width for seq in aligned):
        raise ValueError("interleave requires sequences of equal length; align them first")

    # Rows are levels, columns are input sequences
    grid = np.column_stack([seq.to_numpy() for seq in aligned])
    return BitVector._from_array(grid.reshape(-1))


# --- Entry points ---

def z_index(scalar: BitSource) -> BitVector:
    """Z-index of a single scalar: its canonical bit vector."""
    return canonical_bits(scalar)


def z_index_iter(scalars: Iterable[BitSource]) -> BitVector:
    """
    Z-index of a collection of scalars, in iteration order.
    Scalars may be of different kinds. Errors raised while enumerating bits propagate unchanged.
    """
    # Canonicalize the whole group before aligning: the width depends on every member
    sequences = [canonical_bits(scalar) for scalar in scalars]
    aligned = align_widths(sequences)
    result = interleave(aligned)
    logger.debug("z-index of %d scalars at width %d: %d bits",
                 len(sequences), len(aligned[0]) if aligned else 0, len(result))
    return result


def z_index_tuple(scalars: tuple) -> BitVector:
    """Z-index of a tuple of 2, 3 or 4 scalars, in tuple order."""
    if not isinstance(scalars, tuple):
        raise TypeError(f"z_index_tuple expects a tuple, got {type(scalars).__name__}")
    if not 2 <= len(scalars) <= 4:
        raise ValueError(f"z_index_tuple supports 2, 3 or 4 scalars, got {len(scalars)}")
    return z_index_iter(list(scalars))
