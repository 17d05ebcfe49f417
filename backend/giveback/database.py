import sqlite3
from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from giveback.config import settings


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(db_path: Path | None = None):
    path = db_path or settings.db_path
    engine = create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


engine = get_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


SCHEMA_SQL = """\
-- ============================================================
-- USERS
-- ============================================================
CREATE TABLE IF NOT EXISTS users (
    id          TEXT PRIMARY KEY,
    username    TEXT NOT NULL UNIQUE,
    contact     TEXT,
    location    TEXT,
    date_joined TEXT NOT NULL
);

-- ============================================================
-- REQUESTS
-- ============================================================
CREATE TABLE IF NOT EXISTS requests (
    id           TEXT PRIMARY KEY,
    author_id    TEXT NOT NULL REFERENCES users(id),
    contact      TEXT,
    description  TEXT NOT NULL,
    color        TEXT,
    size         TEXT,
    images       TEXT NOT NULL DEFAULT '[]',
    date_created TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_requests_author ON requests(author_id);
CREATE INDEX IF NOT EXISTS idx_requests_color ON requests(color);
CREATE INDEX IF NOT EXISTS idx_requests_size ON requests(size);
CREATE INDEX IF NOT EXISTS idx_requests_created ON requests(date_created);

-- ============================================================
-- EVENTS
-- ============================================================
CREATE TABLE IF NOT EXISTS events (
    id             TEXT PRIMARY KEY,
    coordinator_id TEXT NOT NULL REFERENCES users(id),
    name           TEXT NOT NULL,
    description    TEXT,
    location       TEXT,
    start_date     TEXT NOT NULL,
    end_date       TEXT NOT NULL,
    date_created   TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_events_coordinator ON events(coordinator_id);
CREATE INDEX IF NOT EXISTS idx_events_location ON events(location);
CREATE INDEX IF NOT EXISTS idx_events_dates ON events(start_date, end_date);

-- ============================================================
-- EVENT RESPONSES
-- event_id is a weak reference: no constraint, no cascade.
-- ============================================================
CREATE TABLE IF NOT EXISTS event_responses (
    id           TEXT PRIMARY KEY,
    author_id    TEXT NOT NULL REFERENCES users(id),
    event_id     TEXT NOT NULL,
    contact      TEXT,
    description  TEXT,
    image_url    TEXT,
    date_created TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_event_responses_event ON event_responses(event_id);
CREATE INDEX IF NOT EXISTS idx_event_responses_author ON event_responses(author_id);
"""


MIGRATIONS: list[str] = []


def init_db(db_path: Path | None = None):
    path = db_path or settings.db_path
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.executescript(SCHEMA_SQL)
    # Run migrations idempotently (ALTER TABLE fails if the column exists)
    for migration in MIGRATIONS:
        try:
            conn.execute(migration)
            conn.commit()
        except sqlite3.OperationalError:
            pass  # already applied
    conn.close()
