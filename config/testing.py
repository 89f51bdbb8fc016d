SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Unroutable on purpose: tests never reach a real geocoder
GEOCODER_URL = "http://127.0.0.1:9/reverse"
GEOCODER_TIMEOUT_SECONDS = 0.5
GEOCODER_USER_AGENT = "geo-attendance-tests/1.0"

CHECKIN_API_BASE_URL = ""
CHECKIN_API_TOKEN = ""
CHECKIN_API_TIMEOUT_SECONDS = 1.0

ATTENDANCE_RECORDS_PATH = ""

FIXED_LATITUDE = ""
FIXED_LONGITUDE = ""
FIXED_ACCURACY = ""
