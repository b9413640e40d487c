from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "onlychurch"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from onlychurch.database.bootstrap import apply_schema, ensure_admin_user, list_tables


def main() -> None:
    parser = argparse.ArgumentParser(description="Apply database/schema.sql to the configured database.")
    parser.add_argument("--admin", action="append", default=[], metavar="USER_ID", help="grant admin console access")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    for user_id in args.admin:
        ensure_admin_user(db_config, user_id=user_id)

    tables = list_tables(db_config)
    print(
        "OK: Applied schema.sql -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(tables)}, admins={len(args.admin)})"
    )


if __name__ == "__main__":
    main()
