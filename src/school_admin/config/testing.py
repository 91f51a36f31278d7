import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": os.getenv("SCHOOL_API_URL", "http://backend.test"),
    "timeout": 5.0,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DASHBOARD_WORKERS = 2
