"""Neuro-symbolic helpers applied to network outputs."""

from .reasoning import RULES, symbolic_reasoning
from .cognitive import cognitive_state, partition_thirds

__all__ = ['RULES', 'symbolic_reasoning', 'cognitive_state', 'partition_thirds']
