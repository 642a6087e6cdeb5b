"""
Orchestration hooks for coordinating several models.

The coordination itself belongs to the embedding host; these calls only check
that every referenced network exists and record the request.
"""

import logging
from typing import Any, Iterable, Optional, Sequence

from .core.registry import Registry

logger = logging.getLogger(__name__)

STRATEGIES = ('hierarchical', 'peer-to-peer', 'neural-guided')


def orchestrate_models(registry: Registry, model_ids: Iterable[int], strategy: str) -> None:
    """
    Validate a coordination request over several networks.

    Args:
        registry: Registry holding the networks
        model_ids: Ids of the networks to coordinate
        strategy: One of STRATEGIES; other names are accepted and ignored
    """
    networks = [registry.get_network(model_id) for model_id in model_ids]
    if strategy not in STRATEGIES:
        logger.debug("Unrecognized orchestration strategy %r", strategy)
    logger.debug("Orchestrating %d networks with strategy %r", len(networks), strategy)


def neural_broadcast(registry: Registry, network_id: int, message: Optional[Sequence[Any]]) -> None:
    """Validate that ``network_id`` exists before the host broadcasts ``message``."""
    network = registry.get_network(network_id)
    logger.debug("Broadcast from %s: %d items", network.name,
                 len(message) if message is not None else 0)
