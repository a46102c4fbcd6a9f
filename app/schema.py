from __future__ import annotations
from sqlalchemy import text
from flask import current_app
from . import db

# preference columns added to "user" after the first release
PREFERENCE_COLUMNS = [("ui_language", "VARCHAR(2)"), ("content_mode", "VARCHAR(4)"), ("smart_learning", "BOOLEAN")]

def _has_column_sqlite(table: str, column: str) -> bool:
    rows = db.session.execute(text(f'PRAGMA table_info("{table}")')).fetchall()
    return any(r[1] == column for r in rows)

def _has_column_pg(table: str, column: str) -> bool:
    q = text("""
        SELECT 1
        FROM information_schema.columns
        WHERE table_name = :table AND column_name = :col
        LIMIT 1
    """)
    r = db.session.execute(q, {"table": table, "col": column}).fetchone()
    return r is not None

def ensure_schema() -> list[str]:
    backend = db.engine.url.get_backend_name()
    current_app.logger.info("Schema check on %s", backend)
    if backend == "postgres":
        backend = "postgresql"
    if backend not in ("sqlite", "postgresql"):
        current_app.logger.warning("No schema upkeep for backend %s", backend)
        return []

    has_column = _has_column_sqlite if backend == "sqlite" else _has_column_pg
    added = []
    for col, ctype in PREFERENCE_COLUMNS:
        if not has_column("user", col):
            db.session.execute(text(f'ALTER TABLE "user" ADD COLUMN {col} {ctype}'))
            added.append(col)
    db.session.commit()
    if added:
        current_app.logger.info("Added user columns: %s", ", ".join(added))
    return added
