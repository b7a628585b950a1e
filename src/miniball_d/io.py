"""Plain-text point file reader and ball writer.

Input files hold one point per row and one coordinate per column, separated by
commas; a trailing comma at the end of a row is allowed. The result is written
as a single line: squared radius first, then the center coordinates.
"""
import numpy as np
from typing import Iterable, List, Tuple

from miniball_d.logging_utils import get_logger

log = get_logger('miniball_d.io')

_DIGITS = set('0123456789')


def estimate_dimension(line: str) -> int:
    '''
    Estimates the number of coordinates per point from a single row of the input file.

    Inputs:
        - line (str):   First row of the input file

    Outputs:
        - dim (int):    Number of commas, plus one if the last coordinate is not followed by a comma
    '''
    dim = line.count(',')
    tail = line[line.rfind(',') + 1:]
    if any(ch in _DIGITS for ch in tail):
        dim += 1
    return dim


def _fields(lines: Iterable[str]) -> List[float]:
    values = []
    for line_nr, line in enumerate(lines, start=1):
        for token in line.split(','):
            token = token.strip()
            if not token:
                continue
            try:
                values.append(float(token))
            except ValueError as err:
                raise ValueError(f"ERROR in 'read_points()': Invalid coordinate '{token}' in line {line_nr}") from err
    return values


def read_points(filepath: str) -> Tuple[int, np.ndarray]:
    '''
    Reads a comma separated point file. The dimension is taken from the first row; all coordinates of the file are then
    grouped into points of that dimension in the order they appear. An incomplete last point is dropped.

    Inputs:
        - filepath (str):       Path to the input file

    Outputs:
        - dim (int):            Dimension of the points
        - points (np.ndarray):  (N, dim) float64 array of points (coordinates are read at single precision)

    Raises FileNotFoundError / OSError if the file cannot be read, ValueError if it holds no point.
    '''
    with open(filepath, 'r') as f:
        lines = f.readlines()

    if not lines or not lines[0].strip():
        raise ValueError(f"ERROR in 'read_points()': Empty data file: {filepath}")

    dim = estimate_dimension(lines[0])
    if dim == 0:
        raise ValueError(f"ERROR in 'read_points()': No coordinates found in the first line of {filepath}")

    values = np.array(_fields(lines), dtype=np.float32).astype(np.float64)
    n = values.size // dim
    if n == 0:
        raise ValueError(f"ERROR in 'read_points()': {filepath} does not hold a complete {dim}-dimensional point")
    if values.size % dim != 0:
        log.warning("Dropping %d trailing coordinate(s) of %s that do not form a complete %d-dimensional point",
                    values.size % dim, filepath, dim)
    return dim, values[:n * dim].reshape(n, dim)


def format_ball(squared_radius: float, center: np.ndarray) -> str:
    """Single line with the squared radius and the center coordinates, six decimals each, without a trailing separator"""
    return ', '.join(f"{value:f}" for value in [squared_radius, *np.asarray(center, dtype=float)])


def write_ball(filepath: str, squared_radius: float, center: np.ndarray):
    '''
    Writes the result line produced by 'format_ball()' (no newline) to 'filepath'.

    Raises OSError if the file cannot be written.
    '''
    with open(filepath, 'w') as f:
        f.write(format_ball(squared_radius, center))
