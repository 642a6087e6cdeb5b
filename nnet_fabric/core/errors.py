"""
Error types for the NNet Fabric runtime.

Every failure is a caller precondition violation, so each error also derives
from the built-in exception a plain Python caller would expect.
"""


class NNetError(Exception):
    """Base class for all runtime errors."""


class InvalidDimension(NNetError, ValueError):
    """A layer or network was requested with a non-positive size."""


class UnknownLayer(NNetError, LookupError):
    """A layer id does not resolve in the registry."""

    def __init__(self, layer_id):
        self.layer_id = layer_id
        super().__init__(f"Layer with ID {layer_id} not found")


class UnknownNetwork(NNetError, LookupError):
    """A network id does not resolve in the registry."""

    def __init__(self, network_id):
        self.network_id = network_id
        super().__init__(f"Network with ID {network_id} not found")


class DimensionMismatch(NNetError, ValueError):
    """An input, target or parameter has the wrong shape for a layer."""


class LengthMismatch(NNetError, ValueError):
    """Two vectors that must be the same length are not."""


class IncompatibleShape(NNetError, ValueError):
    """Matrix shapes cannot be combined."""


class EmptyInput(NNetError, ValueError):
    """An aggregation was asked to reduce an empty sequence."""


class NonNumericInput(NNetError, TypeError):
    """A numeric rule was applied to a sequence holding non-numeric symbols."""
