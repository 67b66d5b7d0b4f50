"""
Constants declarations for geoutm
"""

# UTM scale factor on the central meridian
SCALE_FACTOR = 0.9996

# Offsets applied to easting (all zones) and northing (southern hemisphere), meters
FALSE_EASTING = 500_000.0
FALSE_NORTHING = 10_000_000.0

# Zones are 6 degrees of longitude wide, numbered 1-60 eastward from 180W
ZONE_WIDTH_DEGREES = 6
MIN_ZONE_NUMBER = 1
MAX_ZONE_NUMBER = 60

# Latitude bands are 8 degrees tall starting at 80S; X is stretched to 84N
ZONE_LETTERS = 'CDEFGHJKLMNPQRSTUVWXX'
BAND_HEIGHT_DEGREES = 8
MIN_BAND_LATITUDE = -80.
MAX_BAND_LATITUDE = 84.
OUT_OF_BAND_LETTER = 'Z'

# Number of Krüger series terms used in both directions
KRUGER_ORDER = 7

# Newton-Raphson settings for recovering latitude from conformal latitude
NEWTON_FIXED_ITERATIONS = 5
NEWTON_MAX_ITERATIONS = 10
NEWTON_TOLERANCE = 2.220446049250313e-16 ** 0.5 / 10
