"""Physical constants of the SGP4 model and small angle helpers."""

import math

AE = 1.0
Q0 = 120.0
S0 = 78.0
MU = 398600.8
XKMPER = 6378.135
XJ2 = 1.082616e-3
XJ3 = -2.53881e-6
XJ4 = -1.65597e-6

XKE = 60.0 / math.sqrt(XKMPER * XKMPER * XKMPER / MU)
CK2 = 0.5 * XJ2 * AE * AE
CK4 = -0.375 * XJ4 * AE * AE * AE * AE

QOMS2T = math.pow((Q0 - S0) / XKMPER, 4.0)

S = AE * (1.0 + S0 / XKMPER)
PI = math.pi
TWOPI = 2.0 * PI
TWOTHIRD = 2.0 / 3.0
THDT = 4.37526908801129966e-3

# earth flattening
F = 1.0 / 298.26
# earth rotation per sidereal day
OMEGA_E = 1.00273790934
AU = 1.49597870691e8

SECONDS_PER_DAY = 86400.0
MINUTES_PER_DAY = 1440.0
HOURS_PER_DAY = 24.0

A3OVK2 = -XJ3 / CK2 * AE * AE * AE


def mod(x, y):
    """Remainder of ``x / y`` taking the sign of ``y``; ``x`` when ``y`` is zero."""
    if y == 0.0:
        return x
    return x - y * math.floor(x / y)


def wrap_neg_pos_pi(a):
    """Wrap an angle in radians into [-pi, pi)."""
    return mod(a + PI, TWOPI) - PI


def wrap_two_pi(a):
    """Wrap an angle in radians into [0, 2*pi)."""
    return mod(a, TWOPI)


def wrap_neg_pos_180(a):
    """Wrap an angle in degrees into [-180, 180)."""
    return mod(a + 180.0, 360.0) - 180.0


def wrap_360(a):
    """Wrap an angle in degrees into [0, 360)."""
    return mod(a, 360.0)


def degrees_to_radians(degrees):
    """Convert degrees to radians."""
    return degrees * PI / 180.0


def radians_to_degrees(radians):
    """Convert radians to degrees."""
    return radians * 180.0 / PI


def ac_tan(sinx, cosx):
    """Arc tangent of ``sinx / cosx`` in the range [-pi/2, 3*pi/2)."""
    if cosx == 0.0:
        return PI / 2.0 if sinx > 0.0 else 3.0 * PI / 2.0
    if cosx > 0.0:
        return math.atan(sinx / cosx)
    return PI + math.atan(sinx / cosx)