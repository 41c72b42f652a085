"""Physical unit conversions used by the transit model.

Parameter records carry separations in AU and radii in solar / Jupiter radii;
the geometry is evaluated in units of the stellar radius.
"""

from __future__ import annotations

import astropy.units as u

# 1 AU expressed in solar radii (~215.03)
AU_IN_SOLAR_RADII: float = float((1.0 * u.au).to(u.R_sun).value)

# Equatorial Jupiter radius expressed in solar radii (~0.10276)
JUPITER_RADIUS_IN_SOLAR_RADII: float = float((1.0 * u.R_jup).to(u.R_sun).value)

DAYS_TO_HOURS: float = 24.0

# Above this Rp/Rs the small-planet approximation loses accuracy
SMALL_PLANET_LIMIT: float = 0.1
