"""Rotational orientation of solar-system bodies from the WGCCRE reports.

This package provides:
- Pole right ascension, pole declination and prime-meridian angle for Sol,
  Mercury, Venus, Earth, Moon, Mars, Jupiter, Saturn, Uranus and Neptune
  (WGCCRE 2015 report; Earth and Moon from the 2009 report)
- Conversion of those angles to the frame convention used with VSOP87
- Body-fixed rotation matrices via cspyce and epoch helpers via rms-julian

Elapsed time is in Julian millennia since J2000; all angles are in degrees.
"""

from orientation_tools.frames import axial_tilt, to_vsop87
from orientation_tools.orientation import (
    Body,
    UnsupportedBodyError,
    orientation,
    parse_body,
    raw_orientation,
)

__all__: list[str] = [
    'Body',
    'UnsupportedBodyError',
    'axial_tilt',
    'orientation',
    'parse_body',
    'raw_orientation',
    'to_vsop87',
]
