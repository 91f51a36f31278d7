import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_CONFIG = {
    "base_url": os.getenv("SCHOOL_API_URL", "http://localhost:3000"),
    "timeout": float(os.getenv("SCHOOL_API_TIMEOUT", "20")),
}

DEBUG = True
LOG_LEVEL = os.getenv("SCHOOL_ADMIN_LOG_LEVEL", "DEBUG")

# Parallel fetches used to build the dashboard
DASHBOARD_WORKERS = int(os.getenv("DASHBOARD_WORKERS", "5"))
