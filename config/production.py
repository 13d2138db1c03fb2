import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timesheet_db"),
}

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "1")))

WORK_TIMEZONE = os.getenv("WORK_TIMEZONE", "Asia/Taipei")
LUNCH_START = os.getenv("LUNCH_START", "12:30")
LUNCH_END = os.getenv("LUNCH_END", "13:30")
DOUBLE_IN_POLICY = os.getenv("DOUBLE_IN_POLICY", "KEEP_LATEST")
