"""
Registry of layers and networks addressed by integer ids.

Ids are arena indices: each kind has its own growable list, a new object gets
the next index, and nothing is removed except by ``reset``, which clears both
arenas and starts both counters again at zero.
"""

import logging
import numbers
import threading
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .layers import Layer
from .network import Network
from .optimizer import LastLayerSGD, Sample, fit
from .errors import UnknownLayer, UnknownNetwork
from .tensor import Matrix, Vector

logger = logging.getLogger(__name__)


def _as_id(value: Any) -> Optional[int]:
    # Hosts hand ids over as doubles, so integral floats are accepted.
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    try:
        as_int = int(value)
    except (OverflowError, ValueError):
        return None
    if as_int != value or as_int < 0:
        return None
    return as_int


class Registry:
    """
    Process-wide store of layers and networks.

    Every public method holds one re-entrant lock for its whole duration, so a
    training step can never interleave with a forward pass, another training
    step or a reset. Matrices here are small, which keeps a single lock cheap.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize an empty registry.

        Args:
            seed: Seed for the generator used to initialize layer weights
        """
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self._lock = threading.RLock()
        self._layers: List[Layer] = []
        self._networks: List[Network] = []

    @property
    def layer_count(self) -> int:
        return len(self._layers)

    @property
    def network_count(self) -> int:
        return len(self._networks)

    def create_layer(self, input_size: int, output_size: int, activation: str = "linear") -> int:
        """
        Create a layer with He-normal weights and zero biases.

        Returns:
            The new layer's id
        """
        with self._lock:
            layer_id = len(self._layers)
            layer = Layer(input_size, output_size, activation, rng=self._rng,
                          name=f"Layer {layer_id}")
            self._layers.append(layer)
        logger.debug("Created layer %d: %d -> %d (%s)",
                     layer_id, layer.input_size, layer.output_size, activation)
        return layer_id

    def get_layer(self, layer_id: int) -> Layer:
        with self._lock:
            index = _as_id(layer_id)
            if index is None or index >= len(self._layers):
                raise UnknownLayer(layer_id)
            return self._layers[index]

    def create_network(self, layer_ids: Iterable[int]) -> int:
        """
        Create a network over existing layers, in the given order.

        Duplicate ids are allowed and share the same layer. Adjacent sizes are
        not validated until the first forward pass.

        Returns:
            The new network's id
        """
        with self._lock:
            layers = [self.get_layer(layer_id) for layer_id in layer_ids]
            network_id = len(self._networks)
            self._networks.append(Network(layers, name=f"Network {network_id}"))
        logger.debug("Created network %d from %d layers", network_id, len(layers))
        return network_id

    def get_network(self, network_id: int) -> Network:
        with self._lock:
            index = _as_id(network_id)
            if index is None or index >= len(self._networks):
                raise UnknownNetwork(network_id)
            return self._networks[index]

    def forward(self, network_id: int, inputs: Sequence[float]) -> Vector:
        """Evaluate a network on one input vector."""
        with self._lock:
            return self.get_network(network_id).predict(inputs)

    def train_step(self, network_id: int, inputs: Sequence[float], target: Sequence[float],
                   learning_rate: float) -> None:
        """Apply one last-layer gradient step to a network."""
        with self._lock:
            network = self.get_network(network_id)
            LastLayerSGD(learning_rate).step(network, inputs, target)

    def fit(self, network_id: int, samples: Iterable[Sample], epochs: int = 1,
            learning_rate: float = 0.01, verbose: bool = False) -> Dict[str, List[float]]:
        """Run ``epochs`` passes of training steps over (input, target) pairs."""
        with self._lock:
            network = self.get_network(network_id)
            return fit(network, samples, epochs=epochs, learning_rate=learning_rate,
                       verbose=verbose)

    def set_weights(self, layer_id: int, weights: Sequence[Sequence[float]],
                    biases: Sequence[float]) -> None:
        """Replace a layer's weights and biases; shapes must match the layer."""
        with self._lock:
            self.get_layer(layer_id).set_weights(weights, biases)

    def get_weights(self, layer_id: int) -> Tuple[Matrix, Vector]:
        """Return copies of a layer's weight matrix and bias vector."""
        with self._lock:
            return self.get_layer(layer_id).get_weights()

    def reset(self) -> None:
        """Drop every layer and network; all previously issued ids become invalid."""
        with self._lock:
            dropped = (len(self._layers), len(self._networks))
            self._layers = []
            self._networks = []
        logger.debug("Registry reset, dropped %d layers and %d networks", *dropped)

    def get_config(self) -> Dict[str, Any]:
        """Get registry configuration."""
        with self._lock:
            return {
                'seed': self.seed,
                'layers': len(self._layers),
                'networks': len(self._networks),
            }
