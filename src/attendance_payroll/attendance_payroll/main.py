from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.exceptions import DomainError, PayrollAlreadyRunError
from .core.policy import PayrollPolicy
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .payroll.controller import register as register_payroll
from .schedules.controller import register as register_schedules

logger = logging.getLogger(__name__)

_DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(PayrollAlreadyRunError)
    def _already_run(err: PayrollAlreadyRunError):
        return jsonify({"error": str(err)}), 409

    @app.errorhandler(DomainError)
    def _domain_error(err: DomainError):
        return jsonify({"error": str(err)}), 400


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    db_config = getattr(settings, "DB_CONFIG")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

    if getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(db_config, schema_path=_DATABASE_DIR / "schema.sql")
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if getattr(settings, "AUTO_SEED_DB", False):
        apply_seed_sql(db_config, seed_path=_DATABASE_DIR / "seed.sql")
        logger.info("seed data ready")

    container = build_container(db_config=db_config, policy=PayrollPolicy.from_settings(settings))

    _register_error_handlers(app)
    register_attendance(app, container)
    register_schedules(app, container)
    register_payroll(app, container)

    return app
