import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_portal"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "memory" keeps everything in process; "mysql" uses DB_CONFIG.
STORE_BACKEND = os.getenv("STORE_BACKEND", "memory")
# Optional JSON file with employees/attendance/leaves/payroll lists for the memory backend.
SEED_FILE = os.getenv("SEED_FILE", "")

# If enabled, the records table is created on startup (CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
