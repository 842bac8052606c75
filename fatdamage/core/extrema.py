"""
Turning-point extraction for stress-time histories.

Reduces a raw sample sequence to its sequence of peaks and valleys. Samples
that are neither a peak nor a valley relative to the last accepted turning
point are dropped; the first and last samples are always kept.
"""
import numpy as np
from typing import List, Sequence, Union
from dataclasses import dataclass
import logging

from fatdamage.core.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


Samples = Union[Sequence[float], np.ndarray]


@dataclass(frozen=True)
class Extrema:
    """Turning points of a history.

    Attributes:
        indices: Positions of the turning points in the original samples
        values: Stress values at those positions
    """
    indices: List[int]
    values: List[float]

    def __len__(self) -> int:
        return len(self.values)


def find_extrema(samples: Samples) -> Extrema:
    """
    Extract the local extrema of a stress-time history.

    A sample at interior position i is kept when it is a peak
    (greater than the last kept value and the next sample) or a valley
    (less than both). Comparisons are strict, so flat runs are never
    promoted to turning points.

    Args:
        samples: Stress values at equally spaced time steps (at least 2)

    Returns:
        Extrema with the indices and values of the turning points

    Raises:
        InvalidInputError: If fewer than 2 samples are given

    Examples:
        >>> find_extrema([0, 2, 5, 3, -1, 2, 4, 1]).values
        [0.0, 5.0, -1.0, 4.0, 1.0]
    """
    history = np.asarray(samples, dtype=float).ravel()

    if len(history) < 2:
        raise InvalidInputError(
            f"At least 2 samples are required to extract extrema, got {len(history)}"
        )

    indices = [0]
    values = [float(history[0])]
    last = history[0]

    for i in range(1, len(history) - 1):
        current = history[i]
        following = history[i + 1]
        peak = current > last and current > following
        valley = current < last and current < following
        if peak or valley:
            indices.append(i)
            values.append(float(current))
            last = current

    indices.append(len(history) - 1)
    values.append(float(history[-1]))

    logger.debug(f"Extracted {len(values)} extrema from {len(history)} samples")

    return Extrema(indices=indices, values=values)


def extract_extrema(samples: Samples) -> List[float]:
    """Return only the values of the turning points of *samples*."""
    return find_extrema(samples).values
