"""
NNet Fabric - a small neural-network and neuro-symbolic runtime for embedding hosts.

This package provides:
- Dense layers and networks addressed by integer ids through a registry
- Forward evaluation and a last-layer gradient training step
- Activation functions and elementary tensor operations
- Symbolic aggregation and cognitive-state summaries
"""

__version__ = "0.1.0"

# Core imports
from nnet_fabric.core import (
    NNetError, InvalidDimension, UnknownLayer, UnknownNetwork, DimensionMismatch,
    LengthMismatch, IncompatibleShape, EmptyInput, NonNumericInput,
    Activation, Layer, Network, LastLayerSGD, Registry,
    relu, sigmoid, tanh, softmax, tensor_add, tensor_multiply, tensor_transpose,
)

# Neuro-symbolic helpers
from nnet_fabric.symbolic import symbolic_reasoning, cognitive_state

# Host interface
from nnet_fabric.api import (
    create_layer, create_network, forward, train_step, set_weights, get_weights, reset,
    orchestrate_models, neural_broadcast, get_default_registry, set_default_registry,
)

__all__ = [
    # Errors
    'NNetError', 'InvalidDimension', 'UnknownLayer', 'UnknownNetwork', 'DimensionMismatch',
    'LengthMismatch', 'IncompatibleShape', 'EmptyInput', 'NonNumericInput',

    # Core
    'Activation', 'Layer', 'Network', 'LastLayerSGD', 'Registry',
    'relu', 'sigmoid', 'tanh', 'softmax', 'tensor_add', 'tensor_multiply', 'tensor_transpose',

    # Symbolic
    'symbolic_reasoning', 'cognitive_state',

    # Host interface
    'create_layer', 'create_network', 'forward', 'train_step', 'set_weights', 'get_weights',
    'reset', 'orchestrate_models', 'neural_broadcast', 'get_default_registry',
    'set_default_registry',
]
