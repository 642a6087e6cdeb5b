"""Core runtime components for NNet Fabric."""

from .errors import (
    NNetError, InvalidDimension, UnknownLayer, UnknownNetwork, DimensionMismatch,
    LengthMismatch, IncompatibleShape, EmptyInput, NonNumericInput
)
from .tensor import tensor_add, tensor_multiply, tensor_transpose
from .activations import Activation, relu, sigmoid, tanh, softmax
from .layers import Layer
from .network import Network
from .optimizer import Optimizer, LastLayerSGD, train_step, fit
from .registry import Registry

__all__ = [
    'NNetError', 'InvalidDimension', 'UnknownLayer', 'UnknownNetwork', 'DimensionMismatch',
    'LengthMismatch', 'IncompatibleShape', 'EmptyInput', 'NonNumericInput',
    'tensor_add', 'tensor_multiply', 'tensor_transpose',
    'Activation', 'relu', 'sigmoid', 'tanh', 'softmax',
    'Layer', 'Network', 'Optimizer', 'LastLayerSGD', 'train_step', 'fit', 'Registry'
]
