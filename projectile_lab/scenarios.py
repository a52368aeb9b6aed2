"""
Practice Problem Generator
==========================
Draws a random, physically sensible launch and hides all but two of its
quantities, giving the student a problem in one of four forms:

  standard      u, θ
  range_theta   R, θ
  height_theta  H, θ
  range_time    R, t

Values are rounded to two decimals, as a student would read them off a
worksheet. Launches are from ground level.
"""

import numpy as np
from typing import Optional

from .constants import GRAVITY
from .state import PartialState, SolvedState


SCENARIOS = ['standard', 'range_theta', 'height_theta', 'range_time']

SPEED_RANGE = (15.0, 50.0)   # m/s
ANGLE_RANGE = (30.0, 75.0)   # degrees
QUERY_FRACTION = (0.2, 0.8)  # of flight time / range


def random_scenario(rng: Optional[np.random.Generator] = None,
                    scenario: Optional[str] = None,
                    g: float = GRAVITY) -> PartialState:
    """
    Generate a two-known practice problem.

    Parameters
    ----------
    rng : numpy Generator (seed it for reproducible problems)
    scenario : one of SCENARIOS, random if None
    """
    rng = rng if rng is not None else np.random.default_rng()
    if scenario is None:
        scenario = SCENARIOS[rng.integers(len(SCENARIOS))]
    if scenario not in SCENARIOS:
        raise ValueError(f"Unknown scenario '{scenario}'. Available: {SCENARIOS}")

    u = rng.uniform(*SPEED_RANGE)
    theta = rng.uniform(*ANGLE_RANGE)
    rad = np.radians(theta)

    true_range = u ** 2 * np.sin(2 * rad) / g
    true_height = u ** 2 * np.sin(rad) ** 2 / (2 * g)
    true_time = 2 * u * np.sin(rad) / g

    def fmt(n):
        return round(float(n), 2)

    if scenario == 'standard':
        return PartialState(u=fmt(u), theta=fmt(theta))
    if scenario == 'range_theta':
        return PartialState(range=fmt(true_range), theta=fmt(theta))
    if scenario == 'height_theta':
        return PartialState(max_height=fmt(true_height), theta=fmt(theta))
    return PartialState(range=fmt(true_range), flight_time=fmt(true_time))


def random_query(solved: SolvedState,
                 rng: Optional[np.random.Generator] = None) -> dict:
    """
    Pick a mid-flight time and distance for the point-in-time questions.
    Returns dict with keys: 'time', 'distance'.
    """
    rng = rng if rng is not None else np.random.default_rng()
    return {
        'time': float(solved.flight_time * rng.uniform(*QUERY_FRACTION)),
        'distance': float(solved.range * rng.uniform(*QUERY_FRACTION)),
    }
