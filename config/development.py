import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "onlychurch"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "rolling" (last N days vs the N before) or "calendar_month"
STATS_PERIOD_MODE = os.getenv("STATS_PERIOD_MODE", "rolling")
STATS_ROLLING_DAYS = int(os.getenv("STATS_ROLLING_DAYS", "30"))

REGISTRATION_WEBHOOK_URL = os.getenv("REGISTRATION_WEBHOOK_URL", "")
REGISTRATION_TIMEOUT = float(os.getenv("REGISTRATION_TIMEOUT", "10"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
