"""
Kinematic State Records
=======================
Value objects passed between the resolver, sampler and explanation
generator:

  PartialState     — the six input quantities, each optional
  SolvedState      — every quantity populated, plus velocity components and g
  TrajectorySample — one (x, y, t) point of the flight path
  Unsolvable       — "no solution" signal returned by the resolver

All records are frozen; a new SolvedState is produced for every input.

Coordinate system:
  x = horizontal distance from the launch point
  y = height above the ground datum (up positive)
"""

from dataclasses import dataclass, fields
from typing import Optional

from .constants import GRAVITY


@dataclass(frozen=True)
class PartialState:
    """
    Launch problem as entered by the user; any field may be unknown.
    """
    u: Optional[float] = None            # m/s  launch speed
    theta: Optional[float] = None        # degrees above horizontal
    y0: Optional[float] = 0.0            # m    initial height
    range: Optional[float] = None        # m    horizontal range
    max_height: Optional[float] = None   # m    peak height
    flight_time: Optional[float] = None  # s    time until y = 0

    @property
    def height(self) -> float:
        """Initial height with the ground-level default applied."""
        return self.y0 if self.y0 is not None else 0.0

    def known(self) -> dict:
        """Mapping of field name → value for every present field."""
        return {f.name: getattr(self, f.name) for f in fields(self)
                if getattr(self, f.name) is not None}


@dataclass(frozen=True)
class SolvedState:
    """Fully determined launch, satisfying range = ux · flight_time."""
    u: float
    theta: float
    y0: float
    range: float
    max_height: float
    flight_time: float
    ux: float                            # m/s  horizontal velocity
    uy: float                            # m/s  vertical velocity at launch
    g: float = GRAVITY                   # m/s²  gravity the launch was solved under

    def summary(self) -> str:
        """Human-readable summary string."""
        lines = [
            f"╔══════════════════════════════════════════════╗",
            f"║  LAUNCH SOLUTION{'':<29s}║",
            f"╠══════════════════════════════════════════════╣",
            f"║  Launch speed : {self.u:>10.2f} m/s{'':<15s}║",
            f"║  Angle        : {self.theta:>10.2f} °{'':<17s}║",
            f"║  Init height  : {self.y0:>10.2f} m{'':<17s}║",
            f"║  Gravity      : {self.g:>10.3f} m/s²{'':<14s}║",
            f"║  ux / uy      : {self.ux:>10.2f} / {self.uy:<8.2f} m/s{'':<4s}║",
            f"╠══════════════════════════════════════════════╣",
            f"║  Range        : {self.range:>10.2f} m{'':<17s}║",
            f"║  Max height   : {self.max_height:>10.2f} m{'':<17s}║",
            f"║  Flight time  : {self.flight_time:>10.3f} s{'':<17s}║",
            f"╚══════════════════════════════════════════════╝",
        ]
        return '\n'.join(lines)


@dataclass(frozen=True)
class TrajectorySample:
    """Snapshot of the projectile at one instant."""
    x: float                             # m  horizontal distance
    y: float                             # m  height, never below 0
    t: float                             # s  elapsed time


@dataclass(frozen=True)
class Unsolvable:
    """
    Returned (never raised) when the knowns do not determine a launch:
    no recognised pair of quantities, or a degenerate angle.
    """
    reason: str = "insufficient or inconsistent input"

    def __bool__(self):
        return False
