from __future__ import annotations

import importlib

from hr_portal.config import get_settings_module
from hr_portal.database.bootstrap import apply_schema, list_tables
from hr_portal.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    apply_schema(conn)
    tables = list_tables(conn)
    cfg = conn.config
    print(f"OK: records table ready -> {cfg.user}@{cfg.host}:{cfg.port}/{cfg.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
