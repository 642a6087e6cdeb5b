"""
Symbolic aggregation for the NNet Fabric runtime.
Reduces a sequence of numbers or symbols to one value under a named rule.
"""

from typing import Any, Callable, Dict, Hashable, List, Sequence, Union

import numpy as np

from ..core.errors import EmptyInput
from ..core.tensor import as_vector

SymbolicValue = Union[float, Any]


def _numeric(values: List[Any]) -> np.ndarray:
    return as_vector(values, name="values")


def _max(values: List[Any]) -> float:
    return float(np.max(_numeric(values)))


def _min(values: List[Any]) -> float:
    return float(np.min(_numeric(values)))


def _avg(values: List[Any]) -> float:
    return float(np.mean(_numeric(values)))


def _hashable(value: Any) -> Hashable:
    # True == 1 in Python, but a boolean and a number are different symbols.
    if isinstance(value, bool):
        return (bool, value)
    if isinstance(value, (list, tuple)):
        return tuple(_hashable(v) for v in value)
    return value


def _consensus(values: List[Any]) -> Any:
    """Most frequent element; ties go to the element seen first."""
    counts: Dict[Hashable, int] = {}
    first_seen: Dict[Hashable, Any] = {}
    for value in values:
        key = _hashable(value)
        counts[key] = counts.get(key, 0) + 1
        first_seen.setdefault(key, value)
    winner = max(counts, key=counts.get)
    return first_seen[winner]


RULES: Dict[str, Callable[[List[Any]], SymbolicValue]] = {
    'max': _max,
    'min': _min,
    'avg': _avg,
    'consensus': _consensus,
}


def symbolic_reasoning(values: Sequence[Any], rule: str) -> SymbolicValue:
    """
    Reduce ``values`` under a named rule.

    Args:
        values: Non-empty sequence of numbers, or of arbitrary symbols for
                'consensus' and unrecognized rules
        rule: 'max', 'min', 'avg' or 'consensus'; any other rule returns the
              first element unchanged

    Returns:
        A float for the numeric rules, otherwise an element of ``values``
    """
    values = list(values)
    if not values:
        raise EmptyInput(f"Cannot apply rule {rule!r} to an empty list")

    reducer = RULES.get(rule)
    if reducer is None:
        return values[0]
    return reducer(values)
