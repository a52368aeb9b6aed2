"""
Worked-Solution Generator
=========================
Produces the step-by-step derivation shown when a student asks for help
with one unknown. Each step is a sentence (inline math between `$`
delimiters) and an optional display-mode formula with the numbers
already substituted.

The derivation for `u` follows the same input pattern the resolver
matched, so every number printed here agrees with the solver's output to
the two decimals shown. The point-in-time targets re-derive the velocity
components from u and θ inside the steps instead of quoting solver
fields, so each guide reads on its own.

Targets:
  u, theta, range, max_height, flight_time          — solved quantities
  height_at_time, velocity_at_time, distance_at_time — need extra['time']
  time_to_distance                                   — needs extra['distance']
  time_to_apex
"""

import enum
import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .constants import EPSILON
from .resolver import Case, match_case
from .state import PartialState, SolvedState


@dataclass(frozen=True)
class Step:
    """One line of a worked solution."""
    explanation: str
    latex: Optional[str] = None
    block: bool = True               # render latex in display mode


class Target(str, enum.Enum):
    U = 'u'
    THETA = 'theta'
    RANGE = 'range'
    MAX_HEIGHT = 'max_height'
    FLIGHT_TIME = 'flight_time'
    HEIGHT_AT_TIME = 'height_at_time'
    VELOCITY_AT_TIME = 'velocity_at_time'
    TIME_TO_APEX = 'time_to_apex'
    DISTANCE_AT_TIME = 'distance_at_time'
    TIME_TO_DISTANCE = 'time_to_distance'


def _f(n: float) -> str:
    return f"{n:.2f}"


def _approx(symbol: str, value: float, unit: str) -> str:
    return r"%s \approx %s \text{ %s}" % (symbol, _f(value), unit)


def _uy_step(u: float, theta: float, uy: float, unit: bool = False) -> str:
    tail = r" \text{ m/s}" if unit else ""
    return r"u_y = u \sin(\theta) = %s \sin(%s^\circ) \approx %s%s" % (
        _f(u), _f(theta), _f(uy), tail)


def _ux_step(u: float, theta: float, ux: float) -> str:
    return r"u_x = u \cos(\theta) = %s \cos(%s^\circ) \approx %s \text{ m/s}" % (
        _f(u), _f(theta), _f(ux))


# ══════════════════════════════════════════════════════════════════════════
#  Launch speed — one derivation per resolver reduction
# ══════════════════════════════════════════════════════════════════════════

def _explain_u(partial, solved, extra, g) -> List[Step]:
    case = match_case(partial)
    theta = partial.theta if partial.theta is not None else solved.theta

    if case is Case.RANGE_ANGLE:
        R = partial.range
        return [
            Step(r"We know the Range ($R$) and Launch Angle ($\theta$). "
                 r"We can use the range equation.",
                 r"R = \frac{u^2 \sin(2\theta)}{g}"),
            Step(r"Rearrange the equation to solve for Initial Velocity ($u$):",
                 r"u = \sqrt{\frac{R \cdot g}{\sin(2\theta)}}"),
            Step(r"Substitute $R = %s$, $g = %s$, $\theta = %s^\circ$:"
                 % (_f(R), _f(g), _f(theta)),
                 r"u = \sqrt{\frac{%s \cdot %s}{\sin(%s^\circ)}}"
                 % (_f(R), _f(g), _f(2 * theta))),
            Step("Calculate the result:", _approx('u', solved.u, 'm/s')),
        ]

    if case is Case.HEIGHT_ANGLE:
        H = partial.max_height
        return [
            Step(r"We know the Maximum Height ($H$) and Angle ($\theta$). "
                 r"We can use the max height equation.",
                 r"H = \frac{u^2 \sin^2(\theta)}{2g}"),
            Step(r"Rearrange to solve for $u$:",
                 r"u = \sqrt{\frac{2gH}{\sin^2(\theta)}}"),
            Step(r"Substitute $H = %s$, $g = %s$, $\theta = %s^\circ$:"
                 % (_f(H), _f(g), _f(theta)),
                 r"u = \sqrt{\frac{2 \cdot %s \cdot %s}{\sin^2(%s^\circ)}}"
                 % (_f(g), _f(H), _f(theta))),
            Step("Calculate the result:", _approx('u', solved.u, 'm/s')),
        ]

    if case is Case.TIME_ANGLE:
        t = partial.flight_time
        return [
            Step(r"We know Flight Time ($t$) and Angle ($\theta$). "
                 r"Use the time of flight equation.",
                 r"t = \frac{2 u \sin(\theta)}{g}"),
            Step(r"Rearrange to solve for $u$:",
                 r"u = \frac{g \cdot t}{2 \sin(\theta)}"),
            Step(r"Substitute $t = %s$, $g = %s$, $\theta = %s^\circ$:"
                 % (_f(t), _f(g), _f(theta)),
                 r"u = \frac{%s \cdot %s}{2 \sin(%s^\circ)}"
                 % (_f(g), _f(t), _f(theta))),
            Step("Calculate the result:", _approx('u', solved.u, 'm/s')),
        ]

    if case is Case.RANGE_TIME:
        R, t = partial.range, partial.flight_time
        ux = R / t
        uy = g * t / 2
        return [
            Step(r"We know Range ($R$) and Flight Time ($t$), but not the angle "
                 r"or velocity. We must find components first.",
                 r"u_x = \frac{R}{t}, \quad u_y = \frac{gt}{2}"),
            Step("Calculate components:",
                 r"u_x = \frac{%s}{%s} = %s, \quad u_y = \frac{%s \cdot %s}{2} = %s"
                 % (_f(R), _f(t), _f(ux), _f(g), _f(t), _f(uy))),
            Step(r"Combine components to find total velocity $u$:",
                 r"u = \sqrt{u_x^2 + u_y^2}"),
            Step("Solve:",
                 r"u = \sqrt{%s^2 + %s^2} \approx %s \text{ m/s}"
                 % (_f(ux), _f(uy), _f(solved.u))),
        ]

    # u was given, or the state was never solvable
    return []


# ══════════════════════════════════════════════════════════════════════════
#  Solved quantities (u and θ are always known by now)
# ══════════════════════════════════════════════════════════════════════════

def _explain_theta(partial, solved, extra, g) -> List[Step]:
    case = match_case(partial)
    if case is Case.RANGE_TIME:
        ux = partial.range / partial.flight_time
        uy = g * partial.flight_time / 2
        return [
            Step(r"We calculated the horizontal and vertical velocity components "
                 r"($u_x, u_y$) from Range and Time.",
                 r"u_x = %s, \quad u_y = %s" % (_f(ux), _f(uy))),
            Step(r"Use trigonometry to find the angle $\theta$:",
                 r"\theta = \tan^{-1}\left(\frac{u_y}{u_x}\right)"),
            Step("Substitute and solve:",
                 r"\theta = \tan^{-1}\left(\frac{%s}{%s}\right) \approx %s^\circ"
                 % (_f(uy), _f(ux), _f(solved.theta))),
        ]
    if partial.theta is not None:
        return [
            Step(r"The launch angle is one of the given values: "
                 r"$\theta = %s^\circ$." % _f(partial.theta)),
        ]
    return []


def _explain_range(partial, solved, extra, g) -> List[Step]:
    u, theta = solved.u, solved.theta
    if solved.y0 == 0:
        return [
            Step("Use the standard Range equation for projectile motion.",
                 r"R = \frac{u^2 \sin(2\theta)}{g}"),
            Step(r"Substitute $u = %s$ and $\theta = %s^\circ$:" % (_f(u), _f(theta)),
                 r"R = \frac{%s^2 \sin(2 \cdot %s^\circ)}{%s}"
                 % (_f(u), _f(theta), _f(g))),
            Step("Solve:", _approx('R', solved.range, 'm')),
        ]

    rad = np.radians(theta)
    ux, uy = u * np.cos(rad), u * np.sin(rad)
    t = (uy + np.sqrt(uy ** 2 + 2 * g * solved.y0)) / g
    return [
        Step(r"Launched from a height $y_0 = %s$ m, the range is the horizontal "
             r"velocity multiplied by the full flight time." % _f(solved.y0),
             r"R = u_x \cdot t"),
        Step(r"Calculate horizontal velocity $u_x$:", _ux_step(u, theta, ux)),
        Step(r"The flight time is the positive root of $y_0 + u_y t - \frac{1}{2} g t^2 = 0$, "
             r"with $u_y = %s$ m/s:" % _f(uy),
             r"t = \frac{%s + \sqrt{%s^2 + 2 \cdot %s \cdot %s}}{%s} \approx %s \text{ s}"
             % (_f(uy), _f(uy), _f(g), _f(solved.y0), _f(g), _f(t))),
        Step("Substitute and solve:",
             r"R = %s \cdot %s \approx %s \text{ m}" % (_f(ux), _f(t), _f(solved.range))),
    ]


def _explain_max_height(partial, solved, extra, g) -> List[Step]:
    u, theta = solved.u, solved.theta
    if solved.y0 == 0:
        return [
            Step("Use the Maximum Height equation.",
                 r"H = \frac{u^2 \sin^2(\theta)}{2g}"),
            Step(r"Substitute $u = %s$ and $\theta = %s^\circ$:" % (_f(u), _f(theta)),
                 r"H = \frac{%s^2 \sin^2(%s^\circ)}{2 \cdot %s}"
                 % (_f(u), _f(theta), _f(g))),
            Step("Solve:", _approx('H', solved.max_height, 'm')),
        ]
    return [
        Step(r"The rise above the launch point adds to the initial height $y_0$.",
             r"H = y_0 + \frac{u^2 \sin^2(\theta)}{2g}"),
        Step(r"Substitute $y_0 = %s$, $u = %s$ and $\theta = %s^\circ$:"
             % (_f(solved.y0), _f(u), _f(theta)),
             r"H = %s + \frac{%s^2 \sin^2(%s^\circ)}{2 \cdot %s}"
             % (_f(solved.y0), _f(u), _f(theta), _f(g))),
        Step("Solve:", _approx('H', solved.max_height, 'm')),
    ]


def _explain_flight_time(partial, solved, extra, g) -> List[Step]:
    u, theta = solved.u, solved.theta
    uy = u * np.sin(np.radians(theta))
    if solved.y0 == 0:
        return [
            Step(r"The time of flight is determined by the vertical component "
                 r"of velocity ($u_y$).",
                 r"t = \frac{2 u_y}{g} = \frac{2u \sin(\theta)}{g}"),
            Step(r"First, find the vertical velocity $u_y$:", _uy_step(u, theta, uy)),
            Step(r"Substitute $u_y$ into the time equation:",
                 r"t = \frac{2 \cdot %s}{%s}" % (_f(uy), _f(g))),
            Step("Solve:", _approx('t', solved.flight_time, 's')),
        ]
    return [
        Step(r"Launched from a height $y_0$, the projectile lands when "
             r"$y_0 + u_y t - \frac{1}{2} g t^2 = 0$. Take the positive root.",
             r"t = \frac{u_y + \sqrt{u_y^2 + 2 g y_0}}{g}"),
        Step(r"First, find the vertical velocity $u_y$:", _uy_step(u, theta, uy)),
        Step(r"Substitute $u_y$ and $y_0 = %s$:" % _f(solved.y0),
             r"t = \frac{%s + \sqrt{%s^2 + 2 \cdot %s \cdot %s}}{%s}"
             % (_f(uy), _f(uy), _f(g), _f(solved.y0), _f(g))),
        Step("Solve:", _approx('t', solved.flight_time, 's')),
    ]


# ══════════════════════════════════════════════════════════════════════════
#  Point-in-time questions
# ══════════════════════════════════════════════════════════════════════════

def _explain_height_at_time(partial, solved, extra, g) -> List[Step]:
    if extra.get('time') is None:
        return []
    t = extra['time']
    y0 = solved.y0
    uy = solved.u * np.sin(np.radians(solved.theta))
    y = y0 + uy * t - 0.5 * g * t ** 2

    if y0 == 0:
        formula = r"s_y = u_y t - \frac{1}{2} g t^2"
        substituted = r"s_y = (%s \cdot %s) - (0.5 \cdot %s \cdot %s^2)" % (
            _f(uy), _f(t), _f(g), _f(t))
    else:
        formula = r"s_y = y_0 + u_y t - \frac{1}{2} g t^2"
        substituted = r"s_y = %s + (%s \cdot %s) - (0.5 \cdot %s \cdot %s^2)" % (
            _f(y0), _f(uy), _f(t), _f(g), _f(t))

    steps = [
        Step(r"We need to find the vertical position $s_y$ at time $t = %s$ s." % _f(t),
             formula),
        Step(r"First, ensure we have the initial vertical velocity $u_y$:",
             _uy_step(solved.u, solved.theta, uy, unit=True)),
        Step("Now substitute values into the displacement equation:", substituted),
    ]
    if y < 0:
        steps.append(Step(r"The result is below the ground, so the projectile has "
                          r"already landed:", r"s_y = 0.00 \text{ m}"))
    else:
        steps.append(Step("Calculate:", _approx('s_y', y, 'm')))
    return steps


def _explain_velocity_at_time(partial, solved, extra, g) -> List[Step]:
    if extra.get('time') is None:
        return []
    t = extra['time']
    rad = np.radians(solved.theta)
    ux = solved.u * np.cos(rad)
    uy = solved.u * np.sin(rad)
    vy = uy - g * t
    v = np.sqrt(ux ** 2 + vy ** 2)

    return [
        Step(r"To find velocity at $t = %s$ s, we need both horizontal ($v_x$) "
             r"and vertical ($v_y$) components." % _f(t),
             r"v = \sqrt{v_x^2 + v_y^2}"),
        Step("Horizontal velocity is constant:",
             r"v_x = " + _ux_step(solved.u, solved.theta, ux)),
        Step("Vertical velocity changes due to gravity:",
             r"v_y = u_y - gt = (%s \sin(%s^\circ)) - (%s \cdot %s)"
             % (_f(solved.u), _f(solved.theta), _f(g), _f(t))),
        Step(r"Calculate $v_y$:",
             r"v_y \approx %s - %s = %s \text{ m/s}" % (_f(uy), _f(g * t), _f(vy))),
        Step("Combine components to find total speed:",
             r"v = \sqrt{(%s)^2 + (%s)^2} \approx %s \text{ m/s}"
             % (_f(ux), _f(vy), _f(v))),
    ]


def _explain_time_to_apex(partial, solved, extra, g) -> List[Step]:
    uy = solved.u * np.sin(np.radians(solved.theta))
    return [
        Step(r"At maximum height, the vertical velocity is zero ($v_y = 0$).",
             r"v_y = u_y - gt = 0 \Rightarrow t = \frac{u_y}{g}"),
        Step(r"Calculate initial vertical velocity $u_y$:",
             _uy_step(solved.u, solved.theta, uy)),
        Step("Divide by gravity:", r"t = \frac{%s}{%s}" % (_f(uy), _f(g))),
        Step("Solve:", _approx('t', uy / g, 's')),
    ]


def _explain_distance_at_time(partial, solved, extra, g) -> List[Step]:
    if extra.get('time') is None:
        return []
    t = extra['time']
    ux = solved.u * np.cos(np.radians(solved.theta))
    return [
        Step(r"We want to find the horizontal distance $s_x$ at time $t = %s$ s. "
             r"Horizontal velocity is constant." % _f(t),
             r"s_x = u_x \cdot t"),
        Step(r"Calculate horizontal velocity $u_x$:",
             _ux_step(solved.u, solved.theta, ux)),
        Step("Substitute and solve:",
             r"s_x = %s \cdot %s \approx %s \text{ m}" % (_f(ux), _f(t), _f(ux * t))),
    ]


def _explain_time_to_distance(partial, solved, extra, g) -> List[Step]:
    if extra.get('distance') is None:
        return []
    x = extra['distance']
    ux = solved.u * np.cos(np.radians(solved.theta))
    if abs(ux) <= EPSILON:
        return []
    return [
        Step(r"We want to find the time $t$ it takes to reach a horizontal "
             r"distance $s_x = %s$ m." % _f(x),
             r"s_x = u_x \cdot t \Rightarrow t = \frac{s_x}{u_x}"),
        Step(r"Calculate horizontal velocity $u_x$:",
             _ux_step(solved.u, solved.theta, ux)),
        Step("Substitute and solve:",
             r"t = \frac{%s}{%s} \approx %s \text{ s}" % (_f(x), _f(ux), _f(x / ux))),
    ]


_BUILDERS = {
    Target.U: _explain_u,
    Target.THETA: _explain_theta,
    Target.RANGE: _explain_range,
    Target.MAX_HEIGHT: _explain_max_height,
    Target.FLIGHT_TIME: _explain_flight_time,
    Target.HEIGHT_AT_TIME: _explain_height_at_time,
    Target.VELOCITY_AT_TIME: _explain_velocity_at_time,
    Target.TIME_TO_APEX: _explain_time_to_apex,
    Target.DISTANCE_AT_TIME: _explain_distance_at_time,
    Target.TIME_TO_DISTANCE: _explain_time_to_distance,
}

_missing = set(Target) - set(_BUILDERS)
if _missing:
    raise ImportError(f"No explanation builder for: {sorted(t.value for t in _missing)}")


def explain(target: Union[Target, str], partial: PartialState, solved: SolvedState,
            extra: Optional[Dict[str, float]] = None,
            g: Optional[float] = None) -> List[Step]:
    """
    Worked solution for one unknown.

    Parameters
    ----------
    target : Target or its string value
    partial : the knowns as entered
    solved : resolve(partial, g)
    extra : {'time': s} or {'distance': m} for point-in-time targets
    g : gravitational acceleration, defaults to solved.g

    Returns
    -------
    list of Step, empty for an unknown target or missing extra value
    """
    try:
        target = Target(target)
    except ValueError:
        return []
    if g is None:
        g = solved.g
    return _BUILDERS[target](partial, solved, extra or {}, g)
