import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

APP_NAME = os.getenv("APP_NAME", "Office Check-in")

# "true" keeps everything in the local store; anything else talks to API_BASE_URL
USE_MOCK_API = os.getenv("USE_MOCK_API", "true")
API_BASE_URL = os.getenv("API_BASE_URL", "")

# QR code content employees scan at the office entrance
OFFICE_QR_CODE = os.getenv("OFFICE_QR_CODE", "OFFICE_CHECKIN_SYSTEM")

# JSON file backing the store; empty keeps data in memory only
STORAGE_PATH = os.getenv("STORAGE_PATH", "instance/checkin_store.json")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
