import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timesheet_db"),
}

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))

# Organization clock used for day boundaries, weekends and the lunch window
WORK_TIMEZONE = os.getenv("WORK_TIMEZONE", "Asia/Taipei")
LUNCH_START = os.getenv("LUNCH_START", "12:30")
LUNCH_END = os.getenv("LUNCH_END", "13:30")

# KEEP_LATEST | KEEP_EARLIEST
DOUBLE_IN_POLICY = os.getenv("DOUBLE_IN_POLICY", "KEEP_LATEST")
