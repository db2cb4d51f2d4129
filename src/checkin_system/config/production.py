import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

# No defaults: a production deployment must say what it is.
APP_NAME = os.getenv("APP_NAME", "")
USE_MOCK_API = os.getenv("USE_MOCK_API", "")
API_BASE_URL = os.getenv("API_BASE_URL", "")
OFFICE_QR_CODE = os.getenv("OFFICE_QR_CODE", "")

STORAGE_PATH = os.getenv("STORAGE_PATH", "")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
