import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = {
    "base_url": os.getenv("SCHOOL_API_URL", "https://backend-ms-production.up.railway.app"),
    "timeout": float(os.getenv("SCHOOL_API_TIMEOUT", "20")),
}

DEBUG = False
LOG_LEVEL = os.getenv("SCHOOL_ADMIN_LOG_LEVEL", "INFO")

DASHBOARD_WORKERS = int(os.getenv("DASHBOARD_WORKERS", "5"))
