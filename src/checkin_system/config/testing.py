SECRET_KEY = "test-secret"

APP_NAME = "Office Check-in (test)"
USE_MOCK_API = "true"
API_BASE_URL = ""
OFFICE_QR_CODE = "TEST-OFFICE-CODE"

# in-memory store
STORAGE_PATH = ""

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
