"""
Host-facing call interface.

Each function mirrors one primitive of the embedding host and works against
the process-wide default registry unless a ``registry`` is passed in.
"""

import threading
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .core.activations import relu, sigmoid, softmax, tanh
from .core.registry import Registry
from .core.tensor import Matrix, Vector, tensor_add, tensor_multiply, tensor_transpose
from .symbolic import cognitive_state, symbolic_reasoning
from . import orchestration

_default_registry = Registry()
_default_lock = threading.Lock()


def get_default_registry() -> Registry:
    """Return the registry used when no ``registry`` is passed."""
    with _default_lock:
        return _default_registry


def set_default_registry(registry: Registry) -> Registry:
    """Install ``registry`` as the default and return the one it replaces."""
    global _default_registry
    with _default_lock:
        previous, _default_registry = _default_registry, registry
    return previous


def _resolve(registry: Optional[Registry]) -> Registry:
    return registry if registry is not None else get_default_registry()


def create_layer(input_size: int, output_size: int, activation: str,
                 registry: Optional[Registry] = None) -> int:
    """
    Create a dense layer with He-normal weights and zero biases.

    Args:
        input_size: Length of the layer's input vector
        output_size: Length of the layer's output vector
        activation: 'relu', 'sigmoid', 'tanh' or 'linear'; other names act as the identity
        registry: Registry to use instead of the default

    Returns:
        The new layer's id
    """
    return _resolve(registry).create_layer(input_size, output_size, activation)


def create_network(layer_ids: Iterable[int], registry: Optional[Registry] = None) -> int:
    """
    Create a network from existing layer ids, evaluated in the given order.

    Args:
        layer_ids: Layer ids; an id may appear more than once
        registry: Registry to use instead of the default

    Returns:
        The new network's id
    """
    return _resolve(registry).create_network(layer_ids)


def forward(network_id: int, inputs: Sequence[float],
            registry: Optional[Registry] = None) -> Vector:
    """
    Evaluate a network on one input vector.

    Args:
        network_id: Id of the network
        inputs: Input vector, as long as the first layer's input size
        registry: Registry to use instead of the default

    Returns:
        The output of the last layer
    """
    return _resolve(registry).forward(network_id, inputs)


def train_step(network_id: int, inputs: Sequence[float], target: Sequence[float],
               learning_rate: float, registry: Optional[Registry] = None) -> None:
    """
    Apply one gradient step to the last layer of a network.

    Args:
        network_id: Id of the network
        inputs: Input vector
        target: Desired output, as long as the last layer's output size
        learning_rate: Step size; zero or negative values are allowed
        registry: Registry to use instead of the default
    """
    _resolve(registry).train_step(network_id, inputs, target, learning_rate)


def set_weights(layer_id: int, weights: Sequence[Sequence[float]], biases: Sequence[float],
                registry: Optional[Registry] = None) -> None:
    """Replace a layer's weight matrix and bias vector; both must match the layer's sizes."""
    _resolve(registry).set_weights(layer_id, weights, biases)


def get_weights(layer_id: int, registry: Optional[Registry] = None) -> Tuple[Matrix, Vector]:
    """Return copies of a layer's weight matrix and bias vector."""
    return _resolve(registry).get_weights(layer_id)


def reset(registry: Optional[Registry] = None) -> None:
    """Clear every layer and network in the registry."""
    _resolve(registry).reset()


def orchestrate_models(model_ids: Iterable[int], strategy: str,
                       registry: Optional[Registry] = None) -> None:
    """
    Check a coordination request over several networks.

    Args:
        model_ids: Ids of the networks to coordinate
        strategy: 'hierarchical', 'peer-to-peer' or 'neural-guided'
        registry: Registry to use instead of the default
    """
    orchestration.orchestrate_models(_resolve(registry), model_ids, strategy)


def neural_broadcast(network_id: int, message: Sequence[Any],
                     registry: Optional[Registry] = None) -> None:
    """Check that a network exists before the host broadcasts ``message`` from it."""
    orchestration.neural_broadcast(_resolve(registry), network_id, message)


# Primitive names as the host spells them.
PRIMITIVES: Dict[str, Callable[..., Any]] = {
    'create-layer': create_layer,
    'create-network': create_network,
    'forward': forward,
    'train-step': train_step,
    'set-weights': set_weights,
    'get-weights': get_weights,
    'relu': relu,
    'sigmoid': sigmoid,
    'tanh': tanh,
    'softmax': softmax,
    'tensor-multiply': tensor_multiply,
    'tensor-add': tensor_add,
    'tensor-transpose': tensor_transpose,
    'symbolic-reasoning': symbolic_reasoning,
    'cognitive-state': cognitive_state,
    'orchestrate-models': orchestrate_models,
    'neural-broadcast': neural_broadcast,
}


def primitive_names() -> List[str]:
    return sorted(PRIMITIVES)
