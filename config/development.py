import os

from config import weekdays_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "neiro_calendar"),
}

DEBUG = True

# Billing: fixed price for every attended visit
PRICE_PER_VISIT = int(os.getenv("PRICE_PER_VISIT", "1250"))

# ISO weekdays open for booking (Mon=1..Sun=7); empty means every day
BOOKABLE_WEEKDAYS = weekdays_from_env("BOOKABLE_WEEKDAYS")

MONTH_LOCALE = os.getenv("MONTH_LOCALE", "ru")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
