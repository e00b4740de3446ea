from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import Container, build_container, load_seed
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        backend = getattr(settings, "STORE_BACKEND", "memory")
        db_config = getattr(settings, "DB_CONFIG", None)
        seed_file = getattr(settings, "SEED_FILE", "")
        container = build_container(
            backend=backend,
            db_config=db_config,
            seed=load_seed(seed_file) if seed_file and backend == "memory" else None,
        )
        logger.info("settings=%s backend=%s", settings_module, backend)

        if container.conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn)
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    app.extensions["hr_portal"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_payroll(app, container)
    register_reports(app, container)

    return app
