# interpolation.py
from typing import Sequence

import numpy as np  # type: ignore

from .grid import Cell


def tick_progress(elapsed_ms: float, period_ms: float) -> float:
    """Fraction of the current tick that has passed, clamped to [0, 1]."""
    if period_ms <= 0:
        return 1.0
    return float(min(max(elapsed_ms / period_ms, 0.0), 1.0))


def interpolate(
    previous: Sequence[Cell],
    current: Sequence[Cell],
    elapsed_ms: float,
    period_ms: float,
) -> np.ndarray:
    """
    Visual (x, y) of every segment, in cell units, at a point inside a tick.

    Segment 0 slides from the old head to the new head. Every other segment
    slides from where it was to its new cell, which is the cell its leader
    occupied before the tick, so the body follows the head like a chain. A
    segment added by growth this tick starts on the old tail.

    Returns an array of shape (len(current), 2). Nothing is mutated.
    """
    end = np.asarray(current, dtype=np.float64).reshape(-1, 2)
    if len(previous) == 0:
        return end

    prev = np.asarray(previous, dtype=np.float64).reshape(-1, 2)
    start = np.empty_like(end)
    n = min(len(prev), len(end))
    start[:n] = prev[:n]
    start[n:] = prev[-1]

    t = tick_progress(elapsed_ms, period_ms)
    return start + (end - start) * t
