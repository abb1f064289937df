from collections.abc import Iterable

from .bits import CHUNK_WIDTHS, BitVector, FromU32, UnsignedScalar
from .encoder import z_index_iter

# --- Z-Order helpers for raw integers ---

def as_scalars(values: Iterable[int], scalar_type: type[UnsignedScalar] = FromU32) -> list[UnsignedScalar]:
    """Wraps raw integers in the given scalar kind, raising ValueError for values that do not fit."""
    return [scalar_type(v) for v in values]


def coords_to_z_order(coords: Iterable[int], scalar_type: type[UnsignedScalar] = FromU32) -> BitVector:
    """
    Converts integer coordinates to their Z-index by interleaving bits.
    The first coordinate supplies the most significant bit of every level.
    """
    return z_index_iter(as_scalars(coords, scalar_type))


def z_order_key(coords: Iterable[int], scalar_type: type[UnsignedScalar] = FromU32,
                chunk_bits: int = 64) -> tuple[int, ...]:
    """
    Z-index of the coordinates as a fixed-width sort key.

    The Z-index is read as an integer and split into chunk_bits pieces, most significant first.
    The key spans len(coords) * scalar_type.bits bits, so points with the same number of
    coordinates get keys of the same length that order like their Morton values.
    """
    if chunk_bits not in CHUNK_WIDTHS:
        raise ValueError(f"chunk_bits must be one of {CHUNK_WIDTHS}, got {chunk_bits}")
    scalars = as_scalars(coords, scalar_type)
    value = z_index_iter(scalars).to_int()

    num_chunks = max(1, -(-len(scalars) * scalar_type.bits // chunk_bits))
    mask = (1 << chunk_bits) - 1
    return tuple(value >> (i * chunk_bits) & mask for i in reversed(range(num_chunks)))
