import logging

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from biztime.core.config import settings

logger = logging.getLogger(__name__)

# ----------------------------------------------------
# 1. CREATE ENGINE
# ----------------------------------------------------
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
)


# ----------------------------------------------------
# 2. SQLITE FOREIGN KEYS
# ----------------------------------------------------
@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """
    SQLite ships with foreign keys off; turn them on per connection so
    ON DELETE CASCADE and dangling-code checks behave like Postgres.
    """
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ----------------------------------------------------
# 3. SESSION FACTORY
# ----------------------------------------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ----------------------------------------------------
# 4. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


# ----------------------------------------------------
# 5. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db():
    """
    FastAPI dependency — yields a DB session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ----------------------------------------------------
# 6. AUTO-MIGRATION LOGIC
# ----------------------------------------------------
def table_exists(table_name: str, bind: Engine = None) -> bool:
    inspector = inspect(bind or engine)
    return table_name in inspector.get_table_names()


def run_migrations(bind: Engine = None):
    """
    Performs minimal additive migrations:
    - If a table doesn't exist → create it.
    - If columns are missing → ADD COLUMN.

    Anything more involved (renames, type changes) goes through Alembic.
    """
    # Registers every model on Base.metadata
    from biztime.models import company_model, industry_model, invoice_model  # noqa: F401

    bind = bind or engine

    missing = [
        name for name in Base.metadata.tables if not table_exists(name, bind)
    ]
    if missing:
        logger.info("[DB] Creating tables: %s", ", ".join(missing))
        Base.metadata.create_all(bind=bind)

    inspector = inspect(bind)
    for table_name, table in Base.metadata.tables.items():
        if table_name in missing:
            continue

        existing_cols = [col["name"] for col in inspector.get_columns(table_name)]

        for col_name, col_obj in table.columns.items():
            if col_name not in existing_cols:
                col_type = col_obj.type.compile(bind.dialect)
                alter = f"ALTER TABLE {table_name} ADD COLUMN {col_name} {col_type}"
                logger.info("[DB][MIGRATION] %s", alter)
                with bind.begin() as conn:
                    conn.execute(text(alter))

    logger.info("[DB] Migration complete.")
