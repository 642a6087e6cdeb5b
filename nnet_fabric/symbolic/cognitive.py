"""
Cognitive-state composition.

The input vector is read as three contiguous modalities (perception, memory,
reasoning) and summarised as their means plus the global extremes.
"""

from typing import List, Sequence, Tuple

import numpy as np

from ..core.errors import EmptyInput
from ..core.tensor import as_vector


def partition_thirds(values: Sequence[float]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split at ``n // 3`` and ``2 * n // 3``; the last slice takes the remainder."""
    x = as_vector(values, name="values")
    n = x.size
    return x[:n // 3], x[n // 3:2 * n // 3], x[2 * n // 3:]


def _mean(part: np.ndarray) -> float:
    # 0/0 for an empty slice, as with plain IEEE division.
    if part.size == 0:
        return float("nan")
    return float(np.sum(part) / part.size)


def cognitive_state(values: Sequence[float]) -> List[float]:
    """
    Summarise a vector as [perception mean, memory mean, reasoning mean, max, min].

    Inputs shorter than three elements leave the leading slices empty, and
    their means come back as nan.
    """
    perception, memory, reasoning = partition_thirds(values)
    inputs = np.concatenate([perception, memory, reasoning])
    if inputs.size == 0:
        raise EmptyInput("cognitive_state needs at least one value")

    return [
        _mean(perception),
        _mean(memory),
        _mean(reasoning),
        float(np.max(inputs)),
        float(np.min(inputs)),
    ]
