SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "school_erp_test",
}

STORE_BACKEND = "memory"

LOCK_TIMEOUT_SECONDS = 2
SESSION_YEAR = "2024-25"
STATS_CACHE_SECONDS = 300

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = True
ADMIN_PASSWORD = "admin123"
