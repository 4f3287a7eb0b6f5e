import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_erp"),
}

# "mysql" persists to DB_CONFIG; "memory" keeps everything in-process.
STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")

LOCK_TIMEOUT_SECONDS = float(os.getenv("LOCK_TIMEOUT_SECONDS", "30"))
SESSION_YEAR = os.getenv("SESSION_YEAR", "2024-25")
STATS_CACHE_SECONDS = float(os.getenv("STATS_CACHE_SECONDS", "300"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Also create the fixed sheets and the admin login
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
