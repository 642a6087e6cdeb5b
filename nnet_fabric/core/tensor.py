"""
Tensor operations for the NNet Fabric runtime.
Provides elementwise and matrix arithmetic over nested lists, backed by NumPy.
"""

import numpy as np
from typing import List, Sequence, Union

from .errors import DimensionMismatch, IncompatibleShape, LengthMismatch, NonNumericInput

Number = Union[int, float]
Vector = List[float]
Matrix = List[List[float]]


def as_vector(values: Union[Sequence[Number], np.ndarray], name: str = "input") -> np.ndarray:
    """
    Convert a flat sequence of numbers into a 1-D float64 array.

    Args:
        values: Sequence of numbers
        name: Name used in error messages

    Returns:
        A new 1-D NumPy array
    """
    try:
        array = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise NonNumericInput(f"{name} must contain only numbers") from exc

    if array.ndim != 1:
        raise DimensionMismatch(f"{name} must be a flat list of numbers, got shape {array.shape}")
    return array


def as_matrix(rows: Union[Sequence[Sequence[Number]], np.ndarray], name: str = "matrix") -> np.ndarray:
    """
    Convert a list of rows into a 2-D float64 array.

    An empty list becomes a 0x0 matrix. Ragged rows are rejected.
    """
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2:
            raise IncompatibleShape(f"{name} must be 2-D, got shape {rows.shape}")
        return rows.astype(np.float64)

    rows = list(rows)
    if not rows:
        return np.empty((0, 0), dtype=np.float64)

    try:
        widths = {len(row) for row in rows}
    except TypeError as exc:
        raise IncompatibleShape(f"{name} must be a list of rows") from exc
    if len(widths) != 1:
        raise IncompatibleShape(f"{name} has rows of different lengths: {sorted(widths)}")

    try:
        matrix = np.array(rows, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise NonNumericInput(f"{name} must contain only numbers") from exc

    if matrix.ndim != 2:
        raise IncompatibleShape(f"{name} must be a list of flat rows")
    return matrix


def tensor_add(a: Sequence[Number], b: Sequence[Number]) -> Vector:
    """Elementwise sum of two vectors of equal length."""
    left = as_vector(a, name="a")
    right = as_vector(b, name="b")

    if left.shape != right.shape:
        raise LengthMismatch(f"Tensors must have same length, got {left.size} and {right.size}")

    return (left + right).tolist()


def tensor_multiply(m1: Sequence[Sequence[Number]], m2: Sequence[Sequence[Number]]) -> Matrix:
    """
    Standard matrix product of two matrices.

    Args:
        m1: Left matrix of shape (n, k)
        m2: Right matrix of shape (k, m)

    Returns:
        The (n, m) product as a list of rows
    """
    left = as_matrix(m1, name="m1")
    right = as_matrix(m2, name="m2")

    if left.shape[1] != right.shape[0]:
        raise IncompatibleShape(
            f"Matrix dimensions incompatible for multiplication: "
            f"{left.shape[0]}x{left.shape[1]} and {right.shape[0]}x{right.shape[1]}"
        )

    return (left @ right).tolist()


def tensor_transpose(m: Sequence[Sequence[Number]]) -> Matrix:
    """Swap rows and columns. An empty matrix transposes to an empty list."""
    matrix = as_matrix(m, name="m")
    if matrix.size == 0:
        return []
    return matrix.T.tolist()
