import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "neiro_calendar_test"),
}

DEBUG = False
TESTING = True

PRICE_PER_VISIT = 1250
BOOKABLE_WEEKDAYS = ()
MONTH_LOCALE = "ru"

AUTO_INIT_DB = False
