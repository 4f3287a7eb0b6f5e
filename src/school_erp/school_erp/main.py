from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .api.catalog import register_actions
from .api.controller import register as register_api
from .container import build_container
from .core.constants import DEFAULT_LOCK_TIMEOUT_SECONDS, DEFAULT_SESSION_YEAR, STATS_CACHE_SECONDS
from .database.bootstrap import apply_schema, ensure_admin_user, list_tables, provision_store

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    store_backend = str(getattr(settings, "STORE_BACKEND", "mysql")).lower()
    db_config = getattr(settings, "DB_CONFIG", None)
    logger.info("settings=%s store=%s", settings_module, store_backend)

    if store_backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(
        db_config=db_config,
        store_backend=store_backend,
        lock_timeout_seconds=float(getattr(settings, "LOCK_TIMEOUT_SECONDS", DEFAULT_LOCK_TIMEOUT_SECONDS)),
        session_year=str(getattr(settings, "SESSION_YEAR", DEFAULT_SESSION_YEAR)),
        stats_cache_seconds=float(getattr(settings, "STATS_CACHE_SECONDS", STATS_CACHE_SECONDS)),
    )

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        provision_store(container.store)
        ensure_admin_user(container.store, password=str(getattr(settings, "ADMIN_PASSWORD", "admin123")))

    register_actions(container)
    register_api(app, container)
    app.extensions["school_erp"] = container

    return app
