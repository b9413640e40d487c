import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "onlychurch"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "onlychurch"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STATS_PERIOD_MODE = os.getenv("STATS_PERIOD_MODE", "rolling")
STATS_ROLLING_DAYS = int(os.getenv("STATS_ROLLING_DAYS", "30"))

REGISTRATION_WEBHOOK_URL = os.getenv("REGISTRATION_WEBHOOK_URL", "")
REGISTRATION_TIMEOUT = float(os.getenv("REGISTRATION_TIMEOUT", "10"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
