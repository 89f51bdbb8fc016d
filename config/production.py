import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

GEOCODER_URL = os.getenv("GEOCODER_URL", "https://nominatim.openstreetmap.org/reverse")
GEOCODER_TIMEOUT_SECONDS = float(os.getenv("GEOCODER_TIMEOUT_SECONDS", "5"))
GEOCODER_USER_AGENT = os.getenv("GEOCODER_USER_AGENT", "geo-attendance/1.0")

CHECKIN_API_BASE_URL = os.getenv("CHECKIN_API_BASE_URL", "")
CHECKIN_API_TOKEN = os.getenv("CHECKIN_API_TOKEN", "")
CHECKIN_API_TIMEOUT_SECONDS = float(os.getenv("CHECKIN_API_TIMEOUT_SECONDS", "15"))

ATTENDANCE_RECORDS_PATH = os.getenv("ATTENDANCE_RECORDS_PATH", "")

FIXED_LATITUDE = os.getenv("FIXED_LATITUDE", "")
FIXED_LONGITUDE = os.getenv("FIXED_LONGITUDE", "")
FIXED_ACCURACY = os.getenv("FIXED_ACCURACY", "")
