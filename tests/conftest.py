"""
conftest.py
~~~~~~~~~~~

Shared fixtures for the NNet Fabric test suite.
"""

import pytest

from nnet_fabric import api
from nnet_fabric.core.registry import Registry


@pytest.fixture
def registry():
    """A fresh, seeded registry independent of the process-wide default."""
    return Registry(seed=1234)


@pytest.fixture
def default_registry():
    """Swap in a fresh default registry for the duration of a test."""
    fresh = Registry(seed=99)
    previous = api.set_default_registry(fresh)
    yield fresh
    api.set_default_registry(previous)


@pytest.fixture
def two_layer_network(registry):
    """A 3 -> 4 (relu) -> 2 (linear) network and its layer ids."""
    hidden = registry.create_layer(3, 4, "relu")
    output = registry.create_layer(4, 2, "linear")
    network_id = registry.create_network([hidden, output])
    return network_id, hidden, output
