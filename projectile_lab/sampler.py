"""
Trajectory Sampler
==================
Discretizes a solved flight into evenly spaced time samples for the
chart:

    t_i = i · dt,  dt = flight_time / count,  i = 0 … count
    x_i = ux · t_i
    y_i = max(0, y0 + uy · t_i − ½g · t_i²)

The final sample can dip fractionally below ground through rounding at
t = flight_time, hence the clamp.
"""

import numpy as np
from typing import List, Optional

from .constants import SAMPLE_COUNT
from .state import SolvedState, TrajectorySample


def sample(state: SolvedState, count: int = SAMPLE_COUNT,
           g: Optional[float] = None) -> List[TrajectorySample]:
    """
    Sample the flight path at count+1 instants from launch to landing.

    g defaults to the gravity the state was solved under. Returns an
    empty list when flight_time is not positive.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    if not state.flight_time > 0:
        return []
    g = state.g if g is None else g

    dt = state.flight_time / count
    t = np.arange(count + 1) * dt
    x = state.ux * t
    y = state.y0 + state.uy * t - 0.5 * g * t ** 2
    y = np.clip(y, 0.0, None)

    return [TrajectorySample(x=float(xi), y=float(yi), t=float(ti))
            for xi, yi, ti in zip(x, y, t)]


def as_arrays(samples: List[TrajectorySample]) -> dict:
    """
    Column view of a sample list for plotting.
    Returns dict with keys: 'x', 'y', 't'.
    """
    return {
        'x': np.array([s.x for s in samples]),
        'y': np.array([s.y for s in samples]),
        't': np.array([s.t for s in samples]),
    }
