from .bits import (BitSource, BitVector, FromU8, FromU16, FromU32, FromU64, FromU128,
                   SCALAR_TYPES, UnsignedScalar)
from .encoder import align_widths, canonical_bits, interleave, z_index, z_index_iter, z_index_tuple
from .utils import as_scalars, coords_to_z_order, z_order_key

__all__ = [
    "BitSource", "BitVector", "UnsignedScalar",
    "FromU8", "FromU16", "FromU32", "FromU64", "FromU128", "SCALAR_TYPES",
    "canonical_bits", "align_widths", "interleave",
    "z_index", "z_index_iter", "z_index_tuple",
    "as_scalars", "coords_to_z_order", "z_order_key",
]
