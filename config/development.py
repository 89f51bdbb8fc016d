import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Reverse geocoding (Nominatim-compatible /reverse endpoint)
GEOCODER_URL = os.getenv("GEOCODER_URL", "https://nominatim.openstreetmap.org/reverse")
GEOCODER_TIMEOUT_SECONDS = float(os.getenv("GEOCODER_TIMEOUT_SECONDS", "5"))
GEOCODER_USER_AGENT = os.getenv("GEOCODER_USER_AGENT", "geo-attendance-dev/1.0")

# External check-in/check-out backend
CHECKIN_API_BASE_URL = os.getenv("CHECKIN_API_BASE_URL", "http://localhost:5000/api")
CHECKIN_API_TOKEN = os.getenv("CHECKIN_API_TOKEN", "")
CHECKIN_API_TIMEOUT_SECONDS = float(os.getenv("CHECKIN_API_TIMEOUT_SECONDS", "15"))

# JSON export of attendance records used for reports; empty -> in-memory (no records)
ATTENDANCE_RECORDS_PATH = os.getenv("ATTENDANCE_RECORDS_PATH", "")

# Hosts without positioning hardware report these coordinates
FIXED_LATITUDE = os.getenv("FIXED_LATITUDE", "")
FIXED_LONGITUDE = os.getenv("FIXED_LONGITUDE", "")
FIXED_ACCURACY = os.getenv("FIXED_ACCURACY", "")
