import csv
import logging
import os
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


def generate_points(num_points: int, dims: int = 2, bits: int = 16, seed=None) -> list[tuple[int, ...]]:
    """
    Generates uniformly distributed integer points in [0, 2**bits) along every dimension.
    """
    if not 1 <= bits <= 64:
        raise ValueError(f"bits must be between 1 and 64, got {bits}")
    rng = np.random.default_rng(seed)
    values = rng.integers(0, 1 << bits, size=(num_points, dims), dtype=np.uint64, endpoint=False)
    return [tuple(int(v) for v in row) for row in values]


def load_points(file_path: str, dims: Optional[int] = None) -> list[tuple[int, ...]]:
    """
    Loads integer points from a CSV file with a header row, one coordinate per column.
    If dims is given, only the first dims columns are used.
    Returns:
        A list of tuples of non-negative integer coordinates, or an empty list if the file
        is missing, unreadable or malformed.
    """
    if not os.path.exists(file_path):
        logger.error("Data file not found at %s", file_path)
        return []

    points = []
    try:
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            reader = csv.reader(f)
            next(reader, None)  # Skip header
            for line_no, row in enumerate(reader, start=2):
                if not row:
                    continue
                columns = row[:dims] if dims else row
                if dims and len(columns) < dims:
                    raise IndexError(f"line {line_no} has {len(columns)} columns, expected {dims}")
                point = tuple(int(c) for c in columns)
                if any(v < 0 for v in point):
                    raise ValueError(f"line {line_no} has a negative coordinate")
                points.append(point)
    except (OSError, ValueError, IndexError) as e:
        logger.error("Error processing file %s: %s", file_path, e)
        return []

    logger.debug("Loaded %d points from %s", len(points), file_path)
    return points
