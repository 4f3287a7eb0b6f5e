from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_erp.school_erp.database.bootstrap import apply_schema, list_tables, provision_store
from src.school_erp.school_erp.database.connection import DBConfig, DatabaseConnection
from src.school_erp.school_erp.store.mysql_store import MySQLGridStore


def main() -> None:
    """Create the grid tables, then every fixed sheet with its header row."""

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    target = DBConfig.from_dict(db_config)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    store = MySQLGridStore(DatabaseConnection.get_instance(target))
    created = provision_store(store)

    print(
        f"OK: {target.user}@{target.host}:{target.port}/{target.database} "
        f"tables={', '.join(sorted(list_tables(db_config)))} new sheets={created}"
    )


if __name__ == "__main__":
    main()
