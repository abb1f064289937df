import argparse
import logging
import sys
import time

from tabulate import tabulate

from zdex.bits import SCALAR_TYPES, CHUNK_WIDTHS
from zdex.data_loader import generate_points, load_points
from zdex.utils import coords_to_z_order, z_order_key

# Configuration
DEFAULT_NUM_POINTS = 16
DEFAULT_DIMS = 2
DEFAULT_BITS = 8
DEFAULT_SCALAR_WIDTH = 32
DEFAULT_CHUNK_BITS = 64
DEFAULT_LIMIT = 50


def setup_logging(verbose: bool):
    # No-op when the root logger already has handlers
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, stream=sys.stderr,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def encode_points(points: list[tuple[int, ...]], scalar_width: int, chunk_bits: int) -> list[dict]:
    """
    Computes the Z-index and chunked sort key of every point.
    Returns the rows sorted by key.
    """
    scalar_type = SCALAR_TYPES[scalar_width]
    rows = []
    for point in points:
        rows.append({'point': point,
                     'z': coords_to_z_order(point, scalar_type),
                     'key': z_order_key(point, scalar_type, chunk_bits)})
    rows.sort(key=lambda row: row['key'])
    return rows


def run_zdex(args) -> int:
    """
    Loads or generates points, encodes them and prints them in Z-order.
    Returns the process exit status.
    """
    print("--- Z-Order Index Encoding ---")

    # 1. Load or generate the points
    if args.input:
        print(f"\n1. Loading points from {args.input}...")
        points = load_points(args.input, dims=args.dims)
    else:
        print(f"\n1. Generating {args.num_points} random {args.dims}D points ({args.bits} bits)...")
        points = generate_points(args.num_points, dims=args.dims, bits=args.bits, seed=args.seed)

    if not points:
        print("Could not load data points. Exiting.")
        return 1

    # 2. Encode every point and sort by key
    print(f"2. Encoding {len(points)} points with {args.scalar_width}-bit scalars...")
    start_time = time.perf_counter()
    try:
        rows = encode_points(points, args.scalar_width, args.chunk_bits)
    except (ValueError, TypeError) as e:
        print(f"Error: {e}")
        return 2
    encode_time = (time.perf_counter() - start_time) * 1e3
    print(f"Encoding time: {encode_time:.2f} ms")

    # 3. Print the points in key order
    print("\n--- Points in Z-Order ---")
    headers = ["Point", "Z-Index", "Key"]
    table_data = [
        [", ".join(str(v) for v in row['point']), str(row['z']), " ".join(f"{c:#x}" for c in row['key'])]
        for row in rows[:args.limit]
    ]
    print(tabulate(table_data, headers=headers, tablefmt="grid"))
    if len(rows) > args.limit:
        print(f"... {len(rows) - args.limit} more rows not shown.")
    print("-" * 80)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Encode integer points as Z-order (Morton) indexes.")
    parser.add_argument("--input", type=str, default=None,
                        help="CSV file with a header row and one integer coordinate per column. "
                             "If omitted, random points are generated.")
    parser.add_argument("--num-points", type=int, default=DEFAULT_NUM_POINTS,
                        help="Number of random points to generate.")
    parser.add_argument("--dims", type=int, default=None,
                        help=f"Number of coordinates per point (default {DEFAULT_DIMS} for random points, "
                             "all columns for CSV input).")
    parser.add_argument("--bits", type=int, default=DEFAULT_BITS,
                        help="Bit range of generated coordinates (1-64).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random points.")
    parser.add_argument("--scalar-width", type=int, default=DEFAULT_SCALAR_WIDTH, choices=sorted(SCALAR_TYPES),
                        help="Declared width of the scalar kind each coordinate is wrapped in.")
    parser.add_argument("--chunk-bits", type=int, default=DEFAULT_CHUNK_BITS, choices=CHUNK_WIDTHS,
                        help="Width of the integer chunks the sort key is split into.")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT, help="Maximum number of rows to print.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.input and args.dims is None:
        args.dims = DEFAULT_DIMS
    if not 1 <= args.bits <= 64:
        parser.error("--bits must be between 1 and 64")
    if args.dims is not None and args.dims < 1:
        parser.error("--dims must be at least 1")
    setup_logging(args.verbose)
    return run_zdex(args)


if __name__ == "__main__":
    sys.exit(main())
