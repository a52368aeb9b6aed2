"""
Derived Quantities
==================
Point questions about a solved flight: where is it, how fast is it
going, when does it get somewhere. Each evaluator works from the launch
speed and angle only, so its answer can be checked against the worked
steps in guides.py. Gravity defaults to the g the state was solved
under.
"""

import numpy as np
from typing import Optional

from .constants import EPSILON
from .state import SolvedState


def _components(state: SolvedState):
    rad = np.radians(state.theta)
    return state.u * np.cos(rad), state.u * np.sin(rad)


def height_at(state: SolvedState, t: float, g: Optional[float] = None) -> float:
    """Height (m) at time t, clamped to the ground like the sampler."""
    g = state.g if g is None else g
    _, uy = _components(state)
    y = state.y0 + uy * t - 0.5 * g * t ** 2
    return float(max(y, 0.0))


def distance_at(state: SolvedState, t: float) -> float:
    """Horizontal distance (m) covered after t seconds."""
    ux, _ = _components(state)
    return float(ux * t)


def velocity_at(state: SolvedState, t: float, g: Optional[float] = None) -> float:
    """Speed (m/s) at time t: √(ux² + (uy − g·t)²)."""
    g = state.g if g is None else g
    ux, uy = _components(state)
    vy = uy - g * t
    return float(np.sqrt(ux ** 2 + vy ** 2))


def time_to_apex(state: SolvedState, g: Optional[float] = None) -> float:
    """Time (s) at which vertical velocity reaches zero."""
    g = state.g if g is None else g
    _, uy = _components(state)
    return float(uy / g)


def time_to_distance(state: SolvedState, x: float) -> Optional[float]:
    """
    Time (s) to cover horizontal distance x.
    None for a (near-)vertical launch, which never travels sideways.
    """
    ux, _ = _components(state)
    if abs(ux) <= EPSILON:
        return None
    return float(x / ux)
