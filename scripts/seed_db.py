from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_erp.school_erp.database.bootstrap import ADMIN_USERNAME, ensure_admin_user
from src.school_erp.school_erp.database.connection import DBConfig, DatabaseConnection
from src.school_erp.school_erp.store.mysql_store import MySQLGridStore


def main() -> None:
    # Run scripts/init_db.py first; this only adds the admin login.
    settings = importlib.import_module(get_settings_module())
    store = MySQLGridStore(DatabaseConnection.get_instance(DBConfig.from_dict(dict(settings.DB_CONFIG))))

    created = ensure_admin_user(store, password=str(getattr(settings, "ADMIN_PASSWORD", "admin123")))
    print(f"OK: user '{ADMIN_USERNAME}' {'created' if created else 'already present'}")


if __name__ == "__main__":
    main()
