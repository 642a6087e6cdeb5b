"""
Network class for the NNet Fabric runtime.
A network is an ordered sequence of shared layer references evaluated in turn.
"""

from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import DimensionMismatch, InvalidDimension
from .layers import Layer
from .tensor import Vector, as_vector


class Network:
    """
    An ordered composition of layers.

    The network holds the same ``Layer`` objects the registry owns, never
    copies, so a layer listed twice applies the same parameters twice and
    training through one network is visible through every other network that
    shares the layer. Adjacent layer sizes are not checked here; a mismatch
    surfaces as ``DimensionMismatch`` on the first forward pass.
    """

    def __init__(self, layers: Sequence[Layer], name: Optional[str] = None):
        """
        Initialize the network.

        Args:
            layers: Non-empty sequence of layers, in evaluation order
            name: Name of the network
        """
        if not layers:
            raise InvalidDimension("A network needs at least one layer")
        self.layers: Tuple[Layer, ...] = tuple(layers)
        self.name = name or "Network"

    @property
    def input_size(self) -> int:
        return self.layers[0].input_size

    @property
    def output_size(self) -> int:
        return self.layers[-1].output_size

    @property
    def last_layer(self) -> Layer:
        return self.layers[-1]

    def is_consistent(self) -> bool:
        """Check that every layer's output size feeds the next layer's input size."""
        return all(
            earlier.output_size == later.input_size
            for earlier, later in zip(self.layers, self.layers[1:])
        )

    def forward_with_inputs(self, x: Union[Sequence[float], np.ndarray]) -> Tuple[np.ndarray, np.ndarray]:
        """
        Run the network and also return the last layer's own input.

        Returns:
            Tuple of (last layer input, network output)
        """
        current = as_vector(x, name="input")
        last_input = current
        for position, layer in enumerate(self.layers):
            last_input = current
            try:
                current = layer.forward(current)
            except DimensionMismatch as exc:
                raise DimensionMismatch(f"Layer {position} of {self.name}: {exc}") from exc
        return last_input, current

    def forward(self, x: Union[Sequence[float], np.ndarray]) -> np.ndarray:
        """Forward pass through every layer in order."""
        _, output = self.forward_with_inputs(x)
        return output

    def predict(self, x: Union[Sequence[float], np.ndarray]) -> Vector:
        """Forward pass returning a plain list."""
        return self.forward(x).tolist()

    def __len__(self) -> int:
        return len(self.layers)

    def summary(self) -> List[str]:
        """One line per layer describing its shape and activation."""
        lines = []
        for position, layer in enumerate(self.layers):
            lines.append(f"{position}: {layer.input_size} -> {layer.output_size} "
                         f"({layer.activation_name})")
        return lines
