"""Elapsed-time helpers: Julian millennia from JD, TDB or UTC strings via rms-julian."""

from __future__ import annotations

import logging
import re

import julian

from orientation_tools.config import get_leapsecs_path
from orientation_tools.constants import (
    DAYS_PER_JULIAN_MILLENNIUM,
    J2000_JD,
    SECONDS_PER_JULIAN_MILLENNIUM,
)

logger = logging.getLogger(__name__)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def _ensure_leapsecs() -> None:
    """Load leap seconds once; fall back to the LSK bundled with rms-julian."""
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info('Leap seconds from %s not used (%s); using bundled LSK.', path, e)
    julian.load_lsk()
    _leapsecs_loaded = True


def millennia_from_jd(jd: float) -> float:
    """Convert a (TDB) Julian Date to Julian millennia since J2000.

    Parameters:
        jd: Julian Date.

    Returns:
        (jd - 2451545.0) / 365250.
    """
    return (jd - J2000_JD) / DAYS_PER_JULIAN_MILLENNIUM


def millennia_from_tdb(tdb: float) -> float:
    """Convert TDB seconds past J2000 to Julian millennia."""
    return tdb / SECONDS_PER_JULIAN_MILLENNIUM


def tdb_from_string(string: str) -> float | None:
    """Parse a UTC date/time string to TDB seconds past J2000.

    Parameters:
        string: Date/time string (any format accepted by rms-julian; a
            trailing ISO 'Z' is allowed).

    Returns:
        TDB seconds, or None on parse failure.
    """
    _ensure_leapsecs()
    stripped = string.strip()
    candidates = [stripped]
    if re.search(r'\d[Zz]$', stripped):
        candidates.append(stripped[:-1])
    for candidate in candidates:
        try:
            day, sec = julian.day_sec_from_string(candidate)[:2]
        except (ValueError, TypeError, LookupError, OSError):
            continue
        tai = julian.tai_from_day_sec(int(day), float(sec))
        return float(julian.tdb_from_tai(tai))
    logger.debug('Unparseable date/time %r', string)
    return None


def millennia_from_string(string: str) -> float | None:
    """Parse a UTC date/time string to Julian millennia since J2000 (TDB).

    Returns:
        Elapsed millennia, or None on parse failure.
    """
    tdb = tdb_from_string(string)
    if tdb is None:
        return None
    return millennia_from_tdb(tdb)
