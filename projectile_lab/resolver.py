"""
State Resolver
==============
Determines the complete launch from any recognised pair of knowns.

Two stages:

1. **Normalize**: reduce the knowns to a launch speed and angle (u, θ).
   One closed-form reduction per input pattern, tried in fixed priority:

       LAUNCH        u, θ           (already normalized)
       RANGE_ANGLE   R, θ           u = √(R·g / sin 2θ)
       HEIGHT_ANGLE  H, θ           u = √(2gH / sin²θ)
       TIME_ANGLE    t, θ           u = g·t / (2 sin θ)
       RANGE_TIME    R, t           ux = R/t, uy = g·t/2

2. **Solve**: derive everything else from (u, θ, y0):

       t_peak = uy / g
       H      = y0 + uy·t_peak − ½g·t_peak²
       t      = (uy + √(uy² + 2g·y0)) / g
       R      = ux · t

Degenerate angles (sin θ or sin 2θ within EPSILON of zero) and
unrecognised inputs return Unsolvable instead of raising.
"""

import enum
import numpy as np
from typing import Optional, Tuple, Union

from .constants import GRAVITY, EPSILON
from .state import PartialState, SolvedState, Unsolvable


class Case(enum.Enum):
    """Input pattern that determined the launch, in priority order."""
    LAUNCH = 'u_theta'
    RANGE_ANGLE = 'range_theta'
    HEIGHT_ANGLE = 'max_height_theta'
    TIME_ANGLE = 'flight_time_theta'
    RANGE_TIME = 'range_flight_time'


# (case, required fields), first match wins
_PATTERNS = [
    (Case.LAUNCH, ('u', 'theta')),
    (Case.RANGE_ANGLE, ('range', 'theta')),
    (Case.HEIGHT_ANGLE, ('max_height', 'theta')),
    (Case.TIME_ANGLE, ('flight_time', 'theta')),
    (Case.RANGE_TIME, ('range', 'flight_time')),
]


def match_case(partial: PartialState) -> Optional[Case]:
    """Return the highest-priority pattern present in the knowns."""
    for case, required in _PATTERNS:
        if all(getattr(partial, name) is not None for name in required):
            return case
    return None


def can_resolve(partial: PartialState) -> bool:
    """True if the knowns form a recognised pair (angles not checked)."""
    return match_case(partial) is not None


# ══════════════════════════════════════════════════════════════════════════
#  Stage 1 — reductions to (u, θ)
# ══════════════════════════════════════════════════════════════════════════

Launch = Tuple[float, float]


def _from_launch(partial: PartialState, g: float) -> Launch:
    return partial.u, partial.theta


def _from_range_angle(partial: PartialState, g: float) -> Union[Launch, Unsolvable]:
    sin_2theta = np.sin(2 * np.radians(partial.theta))
    if sin_2theta <= EPSILON:
        return Unsolvable("sin(2θ) ≈ 0: range equation is degenerate at this angle")
    u = np.sqrt(partial.range * g / sin_2theta)
    return float(u), partial.theta


def _from_height_angle(partial: PartialState, g: float) -> Union[Launch, Unsolvable]:
    sin_theta = np.sin(np.radians(partial.theta))
    if abs(sin_theta) <= EPSILON:
        return Unsolvable("sin(θ) ≈ 0: a horizontal launch has no rise")
    u = np.sqrt(2 * g * partial.max_height / sin_theta ** 2)
    return float(u), partial.theta


def _from_time_angle(partial: PartialState, g: float) -> Union[Launch, Unsolvable]:
    sin_theta = np.sin(np.radians(partial.theta))
    if abs(sin_theta) <= EPSILON:
        return Unsolvable("sin(θ) ≈ 0: flight time does not fix the speed")
    u = g * partial.flight_time / (2 * sin_theta)
    return float(u), partial.theta


def _from_range_time(partial: PartialState, g: float) -> Union[Launch, Unsolvable]:
    if abs(partial.flight_time) <= EPSILON:
        return Unsolvable("flight time ≈ 0: horizontal speed is unbounded")
    ux = partial.range / partial.flight_time
    uy = g * partial.flight_time / 2
    u = np.sqrt(ux ** 2 + uy ** 2)
    theta = np.degrees(np.arctan2(uy, ux))
    return float(u), float(theta)


_REDUCTIONS = {
    Case.LAUNCH: _from_launch,
    Case.RANGE_ANGLE: _from_range_angle,
    Case.HEIGHT_ANGLE: _from_height_angle,
    Case.TIME_ANGLE: _from_time_angle,
    Case.RANGE_TIME: _from_range_time,
}


def normalize(partial: PartialState, g: float = GRAVITY) -> Union[Launch, Unsolvable]:
    """
    Reduce the knowns to a launch speed and angle.

    Returns
    -------
    (u, theta) : tuple of float, theta in degrees
        or Unsolvable if no pattern matches or the angle is degenerate.
    """
    case = match_case(partial)
    if case is None:
        return Unsolvable("need two compatible knowns, e.g. u and θ")
    return _REDUCTIONS[case](partial, g)


# ══════════════════════════════════════════════════════════════════════════
#  Stage 2 — closed-form solution from (u, θ)
# ══════════════════════════════════════════════════════════════════════════

def solve_launch(u: float, theta: float, y0: float = 0.0,
                 g: float = GRAVITY) -> SolvedState:
    """
    Solve the flight from launch speed, angle (degrees) and height.

    Only the positive root of y0 + uy·t − ½g·t² = 0 is physical.
    """
    theta_rad = np.radians(theta)
    ux = u * np.cos(theta_rad)
    uy = u * np.sin(theta_rad)

    # Apex: vertical velocity is zero
    t_peak = uy / g
    max_height = y0 + uy * t_peak - 0.5 * g * t_peak ** 2

    flight_time = (uy + np.sqrt(uy ** 2 + 2 * g * y0)) / g

    return SolvedState(
        u=float(u),
        theta=float(theta),
        y0=float(y0),
        range=float(ux * flight_time),
        max_height=float(max_height),
        flight_time=float(flight_time),
        ux=float(ux),
        uy=float(uy),
        g=float(g),
    )


def resolve(partial: PartialState, g: float = GRAVITY) -> Union[SolvedState, Unsolvable]:
    """
    Determine the full launch from a partial state.

    Extra knowns beyond the matched pair are ignored; y0 defaults to 0.
    """
    launch = normalize(partial, g)
    if isinstance(launch, Unsolvable):
        return launch
    u, theta = launch
    return solve_launch(u, theta, partial.height, g)
