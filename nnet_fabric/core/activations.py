"""
Activation functions for the NNet Fabric runtime.

The public primitives accept a number or a list of numbers and answer in kind.
Layers use the array form through ``apply_activation``.
"""

import numbers
from enum import Enum
from typing import Any, Callable, List, Sequence

import numpy as np
from scipy.special import expit

from .errors import EmptyInput
from .tensor import as_vector


class Activation(Enum):
    """Closed set of activations a layer can carry."""

    RELU = "relu"
    SIGMOID = "sigmoid"
    TANH = "tanh"
    LINEAR = "linear"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: Any) -> "Activation":
        """Map an activation name to its member; unrecognized names map to UNKNOWN."""
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


def _relu(x: np.ndarray) -> np.ndarray:
    return np.maximum(x, 0.0)


def _identity(x: np.ndarray) -> np.ndarray:
    return x


_ARRAY_FUNCTIONS = {
    Activation.RELU: _relu,
    Activation.SIGMOID: expit,
    Activation.TANH: np.tanh,
    Activation.LINEAR: _identity,
    Activation.UNKNOWN: _identity,
}


def get_activation(name: Any) -> Callable[[np.ndarray], np.ndarray]:
    """Get the array form of an activation by name or member."""
    if not isinstance(name, Activation):
        name = Activation.from_name(name)
    return _ARRAY_FUNCTIONS[name]


def apply_activation(x: np.ndarray, activation: Activation) -> np.ndarray:
    """Apply an activation elementwise to a float array."""
    return _ARRAY_FUNCTIONS[activation](x)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _elementwise(fn: Callable[[np.ndarray], np.ndarray], x: Any) -> Any:
    # Non-numeric values are handed back untouched, whether scalar or list element.
    if isinstance(x, np.ndarray):
        return fn(x.astype(np.float64))
    if _is_number(x):
        return float(fn(np.float64(x)))
    if isinstance(x, (list, tuple)):
        return [float(fn(np.float64(v))) if _is_number(v) else v for v in x]
    return x


def relu(x: Any) -> Any:
    """ReLU, max(0, x), for a number or each number in a list."""
    return _elementwise(_relu, x)


def sigmoid(x: Any) -> Any:
    """Logistic sigmoid, 1 / (1 + e^-x), for a number or each number in a list."""
    return _elementwise(expit, x)


def tanh(x: Any) -> Any:
    """Hyperbolic tangent for a number or each number in a list."""
    return _elementwise(np.tanh, x)


def softmax(values: Sequence[float]) -> List[float]:
    """
    Softmax over a whole vector.

    The maximum is subtracted before exponentiating so large inputs do not
    overflow.

    Args:
        values: Non-empty list of numbers

    Returns:
        Probabilities summing to 1.0
    """
    x = as_vector(values, name="values")
    if x.size == 0:
        raise EmptyInput("softmax of an empty list is undefined")

    exp_x = np.exp(x - np.max(x))
    return (exp_x / np.sum(exp_x)).tolist()
