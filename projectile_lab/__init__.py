"""
Projectile Motion Lab
=====================
A teaching tool for ideal (drag-free) projectile kinematics. Given any two
compatible knowns among
  - launch speed u and angle θ
  - horizontal range R
  - maximum height H
  - time of flight t
(plus an optional launch height y0) it solves the remaining quantities in
closed form, samples the flight path for plotting, and writes out the
substituted, step-by-step derivation of each unknown.

Gravity is a parameter everywhere (default 9.81 m/s²), with presets for
the Moon, Mars and Jupiter.
"""

from .constants import (
    GRAVITY, STANDARD_GRAVITY, EPSILON, SAMPLE_COUNT,
    VARIABLE_LABELS, VARIABLE_UNITS, ALL_BODIES, surface_gravity,
)
from .state import PartialState, SolvedState, TrajectorySample, Unsolvable
from .resolver import Case, match_case, can_resolve, normalize, solve_launch, resolve
from .sampler import sample, as_arrays
from .queries import (
    height_at, distance_at, velocity_at, time_to_apex, time_to_distance,
)
from .guides import Step, Target, explain
from .persistence import to_query, from_query, parse_number
from .scenarios import SCENARIOS, random_scenario, random_query
from .visualization import plot_trajectory, ensure_output_dir

__version__ = "1.0.0"
__all__ = [
    'PartialState', 'SolvedState', 'TrajectorySample', 'Unsolvable',
    'GRAVITY', 'STANDARD_GRAVITY', 'EPSILON', 'surface_gravity',
    'Case', 'match_case', 'can_resolve', 'normalize', 'solve_launch', 'resolve',
    'sample', 'as_arrays',
    'height_at', 'distance_at', 'velocity_at', 'time_to_apex', 'time_to_distance',
    'Step', 'Target', 'explain',
    'to_query', 'from_query', 'parse_number',
    'SCENARIOS', 'random_scenario', 'random_query',
    'plot_trajectory', 'ensure_output_dir',
]
