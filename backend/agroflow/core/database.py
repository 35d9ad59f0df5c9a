"""
Database configuration and session management
"""
import logging
import threading
import time

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings

logger = logging.getLogger(__name__)


def _build_engine(url: str):
    if url.startswith("sqlite"):
        # Single shared connection so in-memory databases survive across sessions
        sqlite_engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )

        @event.listens_for(sqlite_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return sqlite_engine

    return create_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,
        max_overflow=5,
        pool_recycle=300,  # Recycle connections every 5 minutes
        pool_timeout=30,
        pool_reset_on_return="commit",
        connect_args={
            "connect_timeout": 10,
            "keepalives": 1,
            "keepalives_idle": 30,
            "keepalives_interval": 10,
            "keepalives_count": 5,
        },
        echo=False,
    )


engine = _build_engine(settings.database_url)


# Thread tracking for the warmup
_warmup_thread = None
_warmup_complete = False


def warmup_pool(connections_to_open: int = 2):
    """Pre-create connections to reduce cold start latency"""
    global _warmup_thread, _warmup_complete
    _warmup_complete = False

    def _warmup_sync():
        global _warmup_complete
        try:
            connections = []
            for _ in range(connections_to_open):
                try:
                    conn = engine.connect()
                    conn.execute(text("SELECT 1"))
                    connections.append(conn)
                except Exception as e:
                    logger.warning(f"Failed to create connection during warmup: {e}")

            for conn in connections:
                conn.close()

            if connections:
                logger.info(f"Connection pool warmed up ({len(connections)} connections)")
            else:
                logger.warning("No connections were warmed up")
        finally:
            _warmup_complete = True

    # Daemon thread so startup is never blocked by a slow database
    _warmup_thread = threading.Thread(target=_warmup_sync, daemon=True)
    _warmup_thread.start()


def wait_for_warmup_complete(timeout=5.0):
    """Wait until the warmup thread is done (used for a clean shutdown)"""
    if _warmup_complete:
        return True

    start_time = time.time()
    while not _warmup_complete and (time.time() - start_time) < timeout:
        time.sleep(0.1)

    return _warmup_complete


# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """Dependency to get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
