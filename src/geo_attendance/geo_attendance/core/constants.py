"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_M = 6_371_000.0

DEFAULT_HIGH_ACCURACY = True
DEFAULT_TIMEOUT_MS = 10_000
DEFAULT_MAX_CACHE_AGE_MS = 60_000

DEFAULT_GEOCODER_URL = "https://nominatim.openstreetmap.org/reverse"
DEFAULT_GEOCODER_TIMEOUT_SECONDS = 5.0
DEFAULT_GEOCODER_USER_AGENT = "geo-attendance/1.0"
GEOCODER_ZOOM = 18

DEFAULT_CHECKIN_API_TIMEOUT_SECONDS = 15.0

NOT_AVAILABLE = "N/A"
REPORT_BANNER_WIDTH = 50
REPORT_SECTION_WIDTH = 30
