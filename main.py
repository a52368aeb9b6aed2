#!/usr/bin/env python3
"""
═══════════════════════════════════════════════════════════════════════════════
  PROJECTILE MOTION LAB — Main Runner
═══════════════════════════════════════════════════════════════════════════════

  Solves one launch problem end to end:
    1. Read the knowns (query string, or a random practice problem)
    2. Resolve the full launch
    3. Sample the trajectory and save the chart
    4. Print the worked solution for every unknown
    5. Print the point-in-time questions with their worked solutions

  Usage:
    python main.py "range=50&flight_time=4"     # solve the given knowns
    python main.py "u=20&theta=30" --body=mars  # under Martian gravity
    python main.py --random --seed=7            # random practice problem
    python main.py ... --no-plot                # skip the chart
═══════════════════════════════════════════════════════════════════════════════
"""

import sys
import os
import time
import numpy as np

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from projectile_lab.constants import VARIABLE_LABELS, VARIABLE_UNITS, surface_gravity
from projectile_lab.state import Unsolvable
from projectile_lab.resolver import resolve, match_case
from projectile_lab.sampler import sample
from projectile_lab.queries import (
    height_at, velocity_at, distance_at, time_to_apex, time_to_distance,
)
from projectile_lab.guides import Target, explain
from projectile_lab.persistence import to_query, from_query
from projectile_lab.scenarios import random_scenario, random_query
from projectile_lab.visualization import plot_trajectory, ensure_output_dir

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt


DEFAULT_QUERY = "u=20&theta=30"


def section(title):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def print_steps(steps):
    for i, step in enumerate(steps, 1):
        print(f"  {i}. {step.explanation}")
        if step.latex:
            print(f"       {step.latex}")


def parse_args(argv):
    """Split argv into (query, options). Flags take the form --name[=value]."""
    query = None
    options = {}
    for arg in argv:
        if arg.startswith('--'):
            name, _, value = arg[2:].partition('=')
            options[name] = value if value else True
        else:
            query = arg
    return query, options


def main(argv=None):
    start_time = time.time()
    query, options = parse_args(sys.argv[1:] if argv is None else argv)

    body = options.get('body', 'earth')
    g = surface_gravity(body)

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 1: Knowns
    # ══════════════════════════════════════════════════════════════════════
    section(f"PHASE 1: Knowns (g = {g:.3f} m/s², {body})")

    seed = int(options['seed']) if 'seed' in options else None
    rng = np.random.default_rng(seed)
    if options.get('random'):
        partial = random_scenario(rng, g=g)
    else:
        partial = from_query(query or DEFAULT_QUERY)

    for name, value in partial.known().items():
        print(f"  {VARIABLE_LABELS[name]:<24s} {value:>10.2f} {VARIABLE_UNITS[name]}")
    print(f"\n  Share: ?{to_query(partial)}")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 2: Resolve
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 2: Resolve")
    solved = resolve(partial, g=g)
    if isinstance(solved, Unsolvable):
        print(f"  ✗ No solution: {solved.reason}")
        print("    Check your values or supply a different pair of knowns.")
        return 1

    case = match_case(partial)
    print(f"  Matched pattern: {case.value}")
    print(solved.summary())

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 3: Trajectory
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 3: Trajectory")
    samples = sample(solved)
    if not samples:
        print("  ✗ Flight time is not positive; nothing to plot.")
        return 1
    print(f"  {len(samples)} samples, dt = {samples[1].t - samples[0].t:.4f} s")
    print(f"  {'t (s)':>8} {'x (m)':>10} {'y (m)':>10}")
    for s in samples[::20]:
        print(f"  {s.t:>8.3f} {s.x:>10.2f} {s.y:>10.2f}")

    if not options.get('no-plot'):
        out = ensure_output_dir('outputs')
        fig = plot_trajectory(samples, solved, save_path=f'{out}/trajectory.png')
        plt.close(fig)
        print(f"\n  ✓ Saved: {out}/trajectory.png")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 4: Worked solutions for the unknowns
    # ══════════════════════════════════════════════════════════════════════
    known = partial.known()
    for target in [Target.U, Target.THETA, Target.RANGE,
                   Target.MAX_HEIGHT, Target.FLIGHT_TIME]:
        if target.value in known:
            continue
        section(f"PHASE 4: Solve for {VARIABLE_LABELS[target.value]}")
        print_steps(explain(target, partial, solved))

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 5: Point-in-time questions
    # ══════════════════════════════════════════════════════════════════════
    extra = random_query(solved, rng)
    t_q, x_q = extra['time'], extra['distance']
    questions = [
        (Target.HEIGHT_AT_TIME, f"Height at t = {t_q:.2f} s",
         f"{height_at(solved, t_q):.2f} m"),
        (Target.VELOCITY_AT_TIME, f"Speed at t = {t_q:.2f} s",
         f"{velocity_at(solved, t_q):.2f} m/s"),
        (Target.DISTANCE_AT_TIME, f"Distance at t = {t_q:.2f} s",
         f"{distance_at(solved, t_q):.2f} m"),
        (Target.TIME_TO_APEX, "Time to apex",
         f"{time_to_apex(solved):.2f} s"),
        (Target.TIME_TO_DISTANCE, f"Time to reach x = {x_q:.2f} m",
         f"{time_to_distance(solved, x_q):.2f} s"
         if time_to_distance(solved, x_q) is not None else "never"),
    ]
    for target, label, answer in questions:
        section(f"PHASE 5: {label} → {answer}")
        print_steps(explain(target, partial, solved, extra))

    elapsed = time.time() - start_time
    section("COMPLETE")
    print(f"  Total runtime: {elapsed:.2f} seconds\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
