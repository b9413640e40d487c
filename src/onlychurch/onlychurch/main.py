from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig

from .container import Container, build_container
from .admin.controller import register as register_admin
from .children.controller import register as register_children
from .dashboard.controller import register as register_dashboard
from .departments.controller import register as register_departments
from .events.controller import register as register_events
from .groups.controller import register as register_groups
from .members.controller import register as register_members
from .registration.controller import register as register_registration
from .visitors.controller import register as register_visitors

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if app.config["DEBUG"]:
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")

        container = build_container(
            db_config=db_config,
            period_mode=getattr(settings, "STATS_PERIOD_MODE", "rolling"),
            rolling_days=getattr(settings, "STATS_ROLLING_DAYS", 30),
            webhook_url=getattr(settings, "REGISTRATION_WEBHOOK_URL", None),
            webhook_timeout=getattr(settings, "REGISTRATION_TIMEOUT", 10),
        )

    app.extensions["onlychurch"] = container

    register_dashboard(app, container)
    register_members(app, container)
    register_visitors(app, container)
    register_departments(app, container)
    register_groups(app, container)
    register_children(app, container)
    register_events(app, container)
    register_admin(app, container)
    register_registration(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app
