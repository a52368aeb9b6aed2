"""
Physical Constants & Display Tables
====================================
Gravitational acceleration, the degeneracy guard used by the resolver,
and the labels/units shown next to each input quantity.

Surface gravity for the celestial presets is derived from Newton's law
of gravitation, g = G·M / R², using CODATA G from scipy.constants.

Reference: NASA Planetary Fact Sheets (mass, volumetric mean radius)
"""

from scipy import constants


# ── Solver constants ───────────────────────────────────────────────────────
GRAVITY          = 9.81        # m/s²  classroom value
STANDARD_GRAVITY = constants.g  # m/s²  9.80665 (ISO 80000-3)
EPSILON          = 1e-4        # guard against sin(θ)≈0, sin(2θ)≈0
SAMPLE_COUNT     = 100         # trajectory intervals (count+1 samples)


# ── Input quantities ───────────────────────────────────────────────────────
VARIABLE_LABELS = {
    'u': 'Initial Velocity (u)',
    'theta': 'Angle (θ)',
    'y0': 'Initial Height (y₀)',
    'range': 'Range (R)',
    'max_height': 'Max Height (H)',
    'flight_time': 'Time of Flight (t)',
}

VARIABLE_UNITS = {
    'u': 'm/s',
    'theta': '°',
    'y0': 'm',
    'range': 'm',
    'max_height': 'm',
    'flight_time': 's',
}


# ══════════════════════════════════════════════════════════════════════════
#  Celestial bodies: (mass kg, mean radius m)
# ══════════════════════════════════════════════════════════════════════════

MOON_DATA = {
    'name': 'Moon',
    'mass': 7.346e22,
    'radius': 1.7374e6,
}

MARS_DATA = {
    'name': 'Mars',
    'mass': 6.4171e23,
    'radius': 3.3895e6,
}

JUPITER_DATA = {
    'name': 'Jupiter',
    'mass': 1.89819e27,
    'radius': 6.9911e7,
}

ALL_BODIES = {
    'moon': MOON_DATA,
    'mars': MARS_DATA,
    'jupiter': JUPITER_DATA,
}


def surface_gravity(body: str = 'earth') -> float:
    """
    Gravitational acceleration (m/s²) at the surface of a named body.

    'earth' is the classroom 9.81 used throughout the lab and 'standard'
    is standard gravity; the remaining presets are computed from
    g = G·M / R².
    """
    if body == 'earth':
        return GRAVITY
    if body == 'standard':
        return STANDARD_GRAVITY
    if body not in ALL_BODIES:
        raise ValueError(
            f"Unknown body '{body}'. "
            f"Available: {['earth', 'standard'] + list(ALL_BODIES.keys())}"
        )

    data = ALL_BODIES[body]
    return constants.G * data['mass'] / data['radius'] ** 2
