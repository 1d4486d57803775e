"""Fixed constants: body names, report identifiers, time and angle scales.

From the WGCCRE 2009 and 2015 reports and the VSOP87 frame convention.
"""

# Angle: degrees per circle and the fractions used by frame conversion
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
RIGHT_ANGLE_DEGREES = 90.0

# Time: elapsed time is in Julian millennia; several formulas use days
DAYS_PER_JULIAN_MILLENNIUM = 365250.0
SECONDS_PER_DAY = 86400.0
SECONDS_PER_JULIAN_MILLENNIUM = SECONDS_PER_DAY * DAYS_PER_JULIAN_MILLENNIUM
J2000_JD = 2451545.0

# VSOP87 frame conversion (Stellarium StelCore values)
EARTH_AXIAL_TILT_DEG = 23.4392803055555555556
VSOP87_EPOCH_OFFSET_DEG = 0.0000275

# Report identifiers
REPORT_2009 = 'WGCCRE2009'
REPORT_2015 = 'WGCCRE2015'

# Supported bodies (exact spelling, case-sensitive), in dispatch order
BODY_NAMES = (
    'Sol',
    'Mercury',
    'Venus',
    'Earth',
    'Moon',
    'Mars',
    'Jupiter',
    'Saturn',
    'Uranus',
    'Neptune',
)
