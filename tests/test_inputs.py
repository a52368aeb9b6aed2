"""
Unit Tests for Input Handling
=============================
Query-string persistence, practice-problem generation and the runner.
Run: python -m pytest tests/ -v
"""

import sys
import os
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from projectile_lab.state import PartialState, Unsolvable
from projectile_lab.resolver import resolve
from projectile_lab.persistence import to_query, from_query, parse_number
from projectile_lab.scenarios import SCENARIOS, random_scenario, random_query
import main as runner


class TestPersistence:
    """PartialState ↔ flat key-value string."""

    def test_absent_fields_omitted(self):
        assert to_query(PartialState(range=50, flight_time=4)) == "range=50.0&flight_time=4.0"

    def test_zero_height_omitted(self):
        assert 'y0' not in to_query(PartialState(u=20, theta=30, y0=0.0))
        assert 'y0' not in to_query(PartialState(u=20, theta=30, y0=None))
        assert 'y0=5.0' in to_query(PartialState(u=20, theta=30, y0=5))

    @pytest.mark.parametrize('partial', [
        PartialState(u=20, theta=30),
        PartialState(u=12.345678901, theta=33.3333333, y0=1.5),
        PartialState(max_height=7.25, theta=61.0),
        PartialState(range=50, flight_time=4),
    ])
    def test_round_trip(self, partial):
        assert from_query(to_query(partial)) == partial

    def test_missing_height_reads_as_ground(self):
        partial = from_query("u=20&theta=30")
        assert partial.y0 == 0.0
        assert resolve(partial) == resolve(PartialState(u=20, theta=30, y0=None))

    def test_leading_question_mark_and_blanks(self):
        partial = from_query("?u=20&theta=30&range=&colour=red")
        assert partial == PartialState(u=20.0, theta=30.0)

    @pytest.mark.parametrize('query', ["u=abc&theta=30", "u=nan&theta=30", "u=inf&theta=30"])
    def test_invalid_numbers_rejected(self, query):
        with pytest.raises(ValueError):
            from_query(query)

    def test_parse_number(self):
        assert parse_number(" 2.5 ") == 2.5
        with pytest.raises(ValueError):
            parse_number("")


class TestScenarios:
    """Random practice problems."""

    EXPECTED_KNOWNS = {
        'standard': {'u', 'theta'},
        'range_theta': {'range', 'theta'},
        'height_theta': {'max_height', 'theta'},
        'range_time': {'range', 'flight_time'},
    }

    @pytest.mark.parametrize('scenario', SCENARIOS)
    def test_two_knowns_and_solvable(self, scenario):
        rng = np.random.default_rng(42)
        partial = random_scenario(rng, scenario=scenario)
        assert set(partial.known()) - {'y0'} == self.EXPECTED_KNOWNS[scenario]
        assert partial.y0 == 0.0

        solved = resolve(partial)
        assert not isinstance(solved, Unsolvable)
        assert 14.0 < solved.u < 51.0
        assert 29.0 < solved.theta < 76.0

    def test_values_rounded_to_two_decimals(self):
        partial = random_scenario(np.random.default_rng(1), scenario='range_time')
        for value in partial.known().values():
            assert value == round(value, 2)

    def test_seeded_reproducible(self):
        a = random_scenario(np.random.default_rng(7))
        b = random_scenario(np.random.default_rng(7))
        assert a == b

    def test_unknown_scenario_rejected(self):
        with pytest.raises(ValueError):
            random_scenario(np.random.default_rng(0), scenario='drag')

    def test_query_within_flight(self):
        solved = resolve(PartialState(u=20, theta=45))
        extra = random_query(solved, np.random.default_rng(3))
        assert 0.2 * solved.flight_time <= extra['time'] <= 0.8 * solved.flight_time
        assert 0.2 * solved.range <= extra['distance'] <= 0.8 * solved.range


class TestRunner:
    """End-to-end runner."""

    def test_solvable_problem(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert runner.main(["range=50&flight_time=4", "--seed=1"]) == 0
        out = capsys.readouterr().out
        assert "range_flight_time" in out
        assert (tmp_path / 'outputs' / 'trajectory.png').exists()

    def test_unsolvable_problem(self, capsys):
        assert runner.main(["u=20", "--no-plot"]) == 1
        assert "No solution" in capsys.readouterr().out

    def test_random_problem_on_mars(self, capsys):
        assert runner.main(["--random", "--seed=5", "--body=mars", "--no-plot"]) == 0
        assert "mars" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
