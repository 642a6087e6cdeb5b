"""
Optimizers for the NNet Fabric runtime.
Provides the single-step, last-layer gradient update and a small training loop.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from .errors import DimensionMismatch
from .network import Network
from .tensor import as_vector

logger = logging.getLogger(__name__)

Sample = Tuple[Sequence[float], Sequence[float]]


class Optimizer(ABC):
    """
    Abstract base class for all optimizers.

    All optimizers should inherit from this class and implement the step method.
    """

    def __init__(self, learning_rate: float = 0.01):
        """
        Initialize the optimizer.

        Args:
            learning_rate: Default learning rate, used when a step is not given one
        """
        self.learning_rate = learning_rate
        self.iterations = 0

    @abstractmethod
    def step(self, network: Network, x: Sequence[float], target: Sequence[float],
             learning_rate: Optional[float] = None) -> np.ndarray:
        """
        Perform a single optimization step.

        Args:
            network: Network to update
            x: Input vector
            target: Desired output vector
            learning_rate: Overrides the default learning rate for this step

        Returns:
            The per-output error measured before the update
        """
        pass

    def get_config(self) -> Dict[str, Any]:
        """Get optimizer configuration."""
        return {
            'learning_rate': self.learning_rate,
            'iterations': self.iterations
        }


class LastLayerSGD(Optimizer):
    """
    Gradient descent restricted to the last layer.

    The error ``output - target`` is applied to the last layer's biases and,
    scaled by the last layer's own input, to its weights. Earlier layers are
    never touched. The learning rate is not range-checked: zero freezes the
    layer and a negative value moves it away from the target.
    """

    def step(self, network: Network, x: Sequence[float], target: Sequence[float],
             learning_rate: Optional[float] = None) -> np.ndarray:
        """Perform one last-layer update and return the pre-update error."""
        lr = float(self.learning_rate if learning_rate is None else learning_rate)

        last_input, output = network.forward_with_inputs(x)
        target = as_vector(target, name="target")
        if target.shape != output.shape:
            raise DimensionMismatch(
                f"target must have {output.size} entries, got {target.size}"
            )

        error = output - target
        layer = network.last_layer
        layer.biases -= lr * error
        layer.weights -= lr * np.outer(error, last_input)

        self.iterations += 1
        logger.debug("Updated last layer of %s, mse=%.6f", network.name, float(np.mean(error ** 2)))
        return error


def train_step(network: Network, x: Sequence[float], target: Sequence[float],
               learning_rate: float) -> np.ndarray:
    """Apply one ``LastLayerSGD`` step with an explicit learning rate."""
    return LastLayerSGD(learning_rate).step(network, x, target)


def fit(network: Network, samples: Iterable[Sample], epochs: int = 1,
        learning_rate: float = 0.01, optimizer: Optional[Optimizer] = None,
        verbose: bool = False) -> Dict[str, List[float]]:
    """
    Repeatedly apply the training step over (input, target) pairs.

    Args:
        network: Network to train
        samples: Iterable of (input, target) pairs
        epochs: Number of passes over the samples
        learning_rate: Learning rate for the default optimizer
        optimizer: Optimizer to use instead of ``LastLayerSGD(learning_rate)``
        verbose: Whether to show a progress bar

    Returns:
        Training history with the mean squared error of each epoch
    """
    samples = list(samples)
    if epochs < 0:
        raise ValueError(f"epochs must be non-negative, got {epochs}")

    optimizer = optimizer or LastLayerSGD(learning_rate)
    history: Dict[str, List[float]] = {'loss': []}

    for epoch in range(epochs):
        if verbose:
            pbar = tqdm(samples, desc=f"Epoch {epoch + 1}/{epochs}")
        else:
            pbar = samples

        total_loss = 0.0
        for x, target in pbar:
            error = optimizer.step(network, x, target)
            loss = float(np.mean(error ** 2))
            total_loss += loss
            if verbose:
                pbar.set_postfix({'loss': f'{loss:.4f}'})

        epoch_loss = total_loss / len(samples) if samples else 0.0
        history['loss'].append(epoch_loss)
        logger.debug("Epoch %d/%d of %s: loss=%.6f", epoch + 1, epochs, network.name, epoch_loss)

    return history
