"""
Unit Tests for Worked Solutions
===============================
Every number printed in a guide must agree with the solver to the two
decimals shown.
Run: python -m pytest tests/ -v
"""

import sys
import os
import dataclasses
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from projectile_lab import guides
from projectile_lab.constants import surface_gravity
from projectile_lab.state import PartialState
from projectile_lab.resolver import resolve
from projectile_lab.queries import (
    height_at, distance_at, velocity_at, time_to_apex, time_to_distance,
)
from projectile_lab.guides import Step, Target, explain


def f(n):
    return f"{n:.2f}"


U_PATTERNS = [
    PartialState(range=50, theta=40),
    PartialState(max_height=12, theta=65),
    PartialState(flight_time=3, theta=35),
    PartialState(range=50, flight_time=4),
]


class TestLaunchSpeedGuide:
    """One derivation per resolver reduction."""

    @pytest.mark.parametrize('partial', U_PATTERNS)
    def test_final_step_matches_solver(self, partial):
        solved = resolve(partial)
        steps = explain('u', partial, solved)
        assert len(steps) == 4
        assert f(solved.u) in steps[-1].latex

    @pytest.mark.parametrize('partial', U_PATTERNS)
    def test_reductions_under_other_gravity(self, partial):
        g = surface_gravity('mars')
        solved = resolve(partial, g=g)
        steps = explain(Target.U, partial, solved, g=g)
        assert f(solved.u) in steps[-1].latex
        assert any(f(g) in (s.latex or '') for s in steps)

    def test_range_angle_substitution(self):
        partial = PartialState(range=50, theta=40)
        steps = explain('u', partial, resolve(partial))
        assert '50.00' in steps[2].latex
        assert '80.00' in steps[2].latex      # 2θ
        assert '9.81' in steps[2].latex

    def test_range_time_components(self):
        partial = PartialState(range=50, flight_time=4)
        solved = resolve(partial)
        steps = explain('u', partial, solved)
        assert f(solved.ux) in steps[1].latex
        assert f(solved.uy) in steps[1].latex

    def test_given_speed_has_no_guide(self):
        partial = PartialState(u=20, theta=30)
        assert explain('u', partial, resolve(partial)) == []


BODIES = ['earth', 'moon', 'mars']


class TestSolvedQuantityGuides:
    """Range, height, time and angle from the known launch."""

    @pytest.mark.parametrize('body', BODIES)
    @pytest.mark.parametrize('y0', [0.0, 12.0])
    def test_range(self, y0, body):
        g = surface_gravity(body)
        partial = PartialState(u=20, theta=30, y0=y0)
        solved = resolve(partial, g=g)
        steps = explain('range', partial, solved)
        assert f(solved.range) in steps[-1].latex
        assert any(f(g) in (s.latex or '') for s in steps)
        if y0:
            assert f(solved.flight_time) in steps[2].latex

    @pytest.mark.parametrize('body', BODIES)
    @pytest.mark.parametrize('y0', [0.0, 12.0])
    def test_max_height(self, y0, body):
        g = surface_gravity(body)
        partial = PartialState(range=40, theta=55, y0=y0)
        solved = resolve(partial, g=g)
        steps = explain('max_height', partial, solved)
        assert f(solved.max_height) in steps[-1].latex
        assert f(g) in steps[1].latex

    @pytest.mark.parametrize('body', BODIES)
    @pytest.mark.parametrize('y0', [0.0, 12.0])
    def test_flight_time(self, y0, body):
        g = surface_gravity(body)
        partial = PartialState(u=18, theta=70, y0=y0)
        solved = resolve(partial, g=g)
        steps = explain('flight_time', partial, solved)
        assert f(solved.flight_time) in steps[-1].latex
        assert f(solved.uy) in steps[1].latex
        assert f(g) in steps[2].latex

    def test_explicit_gravity_matches_stored(self):
        g = surface_gravity('moon')
        partial = PartialState(u=18, theta=70)
        solved = resolve(partial, g=g)
        for target in ('range', 'max_height', 'flight_time'):
            assert explain(target, partial, solved, g=g) == explain(target, partial, solved)

    def test_theta_from_range_and_time(self):
        partial = PartialState(range=50, flight_time=4)
        solved = resolve(partial)
        steps = explain('theta', partial, solved)
        assert len(steps) == 3
        assert f(solved.theta) in steps[-1].latex

    def test_given_theta_is_stated(self):
        partial = PartialState(range=50, theta=40)
        steps = explain('theta', partial, resolve(partial))
        assert len(steps) == 1
        assert '40.00' in steps[0].explanation


class TestPointInTimeGuides:
    """Guides for questions about one instant or one distance."""

    @pytest.fixture(autouse=True, params=BODIES)
    def launch(self, request):
        self.g = surface_gravity(request.param)
        self.partial = PartialState(u=25, theta=50, y0=2)
        self.solved = resolve(self.partial, g=self.g)

    def test_height_at_time(self):
        steps = explain('height_at_time', self.partial, self.solved, {'time': 1.5})
        assert f(height_at(self.solved, 1.5)) in steps[-1].latex
        assert 'y_0' in steps[0].latex
        assert f(self.g) in steps[2].latex

    def test_height_after_landing_is_ground(self):
        t = self.solved.flight_time + 2.0
        steps = explain('height_at_time', self.partial, self.solved, {'time': t})
        assert '0.00' in steps[-1].latex
        assert height_at(self.solved, t) == 0.0

    def test_velocity_at_time(self):
        steps = explain('velocity_at_time', self.partial, self.solved, {'time': 2.0})
        assert len(steps) == 5
        assert f(velocity_at(self.solved, 2.0)) in steps[-1].latex
        assert f(self.g) in steps[2].latex

    def test_time_to_apex(self):
        steps = explain('time_to_apex', self.partial, self.solved)
        assert f(time_to_apex(self.solved)) in steps[-1].latex
        assert f(self.solved.uy / self.g) in steps[-1].latex
        assert f(self.g) in steps[2].latex

    def test_distance_at_time(self):
        steps = explain('distance_at_time', self.partial, self.solved, {'time': 1.0})
        assert f(distance_at(self.solved, 1.0)) in steps[-1].latex

    def test_time_to_distance(self):
        steps = explain('time_to_distance', self.partial, self.solved, {'distance': 30.0})
        assert f(time_to_distance(self.solved, 30.0)) in steps[-1].latex

    @pytest.mark.parametrize('target', [
        'height_at_time', 'velocity_at_time', 'distance_at_time', 'time_to_distance',
    ])
    def test_missing_extra_gives_nothing(self, target):
        assert explain(target, self.partial, self.solved) == []
        assert explain(target, self.partial, self.solved, {}) == []

    def test_vertical_launch_has_no_time_to_distance(self):
        partial = PartialState(u=10, theta=90)
        solved = resolve(partial)
        assert explain('time_to_distance', partial, solved, {'distance': 5.0}) == []


class TestDispatch:
    """Target lookup and step format."""

    def test_every_target_has_a_builder(self):
        assert set(guides._BUILDERS) == set(Target)

    def test_unknown_target_gives_nothing(self):
        partial = PartialState(u=20, theta=30)
        assert explain('drag', partial, resolve(partial)) == []

    def test_string_and_enum_targets_agree(self):
        partial = PartialState(u=20, theta=30)
        solved = resolve(partial)
        assert explain('range', partial, solved) == explain(Target.RANGE, partial, solved)

    def test_inline_math_delimiters_balanced(self):
        partial = PartialState(range=50, flight_time=4, y0=0)
        solved = resolve(partial)
        extra = {'time': 1.0, 'distance': 10.0}
        for target in Target:
            for step in explain(target, partial, solved, extra):
                assert step.explanation.count('$') % 2 == 0
                assert '$' not in (step.latex or '')

    def test_steps_are_immutable(self):
        step = Step("Solve:", "x = 1")
        assert step.block
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.latex = "x = 2"

    def test_explain_does_not_alter_state(self):
        partial = PartialState(range=50, theta=40)
        solved = resolve(partial)
        before = (dataclasses.asdict(partial), dataclasses.asdict(solved))
        for target in Target:
            explain(target, partial, solved, {'time': 1.0, 'distance': 5.0})
        assert before == (dataclasses.asdict(partial), dataclasses.asdict(solved))


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
