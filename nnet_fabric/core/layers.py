"""
Fully connected layers for the NNet Fabric runtime.
A layer owns one affine transform (weights and biases) and an activation tag.
"""

import math
import numbers
import warnings
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from .activations import Activation, apply_activation
from .errors import DimensionMismatch, InvalidDimension
from .tensor import Matrix, Vector, as_matrix, as_vector


def he_normal(output_size: int, input_size: int,
              rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Standard-normal weights scaled by sqrt(2 / input_size)."""
    rng = rng if rng is not None else np.random.default_rng()
    std = math.sqrt(2.0 / input_size)
    return rng.standard_normal((output_size, input_size)) * std


def _as_size(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDimension(f"{label} must be a positive integer, got {value!r}")
    if not math.isfinite(value) or value != int(value) or value <= 0:
        raise InvalidDimension(f"Layer sizes must be positive integers, got {label}={value!r}")
    return int(value)


class Layer:
    """
    Dense layer computing ``activation(weights @ x + biases)``.

    ``weights`` has shape (output_size, input_size) and ``biases`` has shape
    (output_size,). Both are float64 arrays mutated in place by training.
    """

    def __init__(self, input_size: int, output_size: int, activation: str = "linear",
                 rng: Optional[np.random.Generator] = None, name: Optional[str] = None):
        """
        Initialize the layer with He-normal weights and zero biases.

        Args:
            input_size: Length of the input vector
            output_size: Length of the output vector
            activation: 'relu', 'sigmoid', 'tanh' or 'linear'; anything else
                        is kept verbatim and behaves as the identity
            rng: NumPy generator used for weight initialization
            name: Optional name for the layer
        """
        self.input_size = _as_size(input_size, "input_size")
        self.output_size = _as_size(output_size, "output_size")
        self.activation_name = activation
        self.activation = Activation.from_name(activation)
        self.name = name or self.__class__.__name__

        if self.activation is Activation.UNKNOWN and activation != Activation.UNKNOWN.value:
            warnings.warn(f"Unknown activation {activation!r}, layer will use the identity")

        self.weights = he_normal(self.output_size, self.input_size, rng)
        self.biases = np.zeros(self.output_size, dtype=np.float64)

    def forward(self, x: np.ndarray) -> np.ndarray:
        """
        Forward pass for a single input vector.

        Args:
            x: 1-D array of length input_size

        Returns:
            1-D array of length output_size
        """
        if x.shape != (self.input_size,):
            raise DimensionMismatch(
                f"{self.name} expects an input of length {self.input_size}, got shape {x.shape}"
            )
        return apply_activation(self.weights @ x + self.biases, self.activation)

    def __call__(self, x: np.ndarray) -> np.ndarray:
        return self.forward(x)

    def get_weights(self) -> Tuple[Matrix, Vector]:
        """Return copies of the weight matrix and bias vector as lists."""
        return self.weights.tolist(), self.biases.tolist()

    def set_weights(self, weights: Sequence[Sequence[float]], biases: Sequence[float]):
        """
        Replace weights and biases wholesale.

        Shapes are checked against the layer's sizes before anything is
        written, so a rejected call leaves the layer untouched.
        """
        new_weights = as_matrix(weights, name="weights")
        new_biases = as_vector(biases, name="biases")

        expected = (self.output_size, self.input_size)
        if new_weights.shape != expected:
            raise DimensionMismatch(
                f"weights must be {expected[0]}x{expected[1]}, got "
                f"{new_weights.shape[0]}x{new_weights.shape[1]}"
            )
        if new_biases.shape != (self.output_size,):
            raise DimensionMismatch(
                f"biases must have {self.output_size} entries, got {new_biases.size}"
            )

        self.weights = new_weights
        self.biases = new_biases

    def get_config(self) -> Dict[str, Any]:
        """Get layer configuration."""
        return {
            'name': self.name,
            'input_size': self.input_size,
            'output_size': self.output_size,
            'activation': self.activation_name,
        }

    def __repr__(self) -> str:
        return (f"Layer(input_size={self.input_size}, output_size={self.output_size}, "
                f"activation={self.activation_name!r})")
