import os

from config import weekdays_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "neiro_calendar"),
}

DEBUG = False

PRICE_PER_VISIT = int(os.getenv("PRICE_PER_VISIT", "1250"))
BOOKABLE_WEEKDAYS = weekdays_from_env("BOOKABLE_WEEKDAYS")
MONTH_LOCALE = os.getenv("MONTH_LOCALE", "ru")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
