from pathlib import Path

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker
import logging

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def build_engine(storage_path: str, echo: bool = False) -> Engine:
    """
    Create a SQLite engine for the given database file.

    The parent directory is created when missing; SQLite itself creates
    the file on first connect.
    """
    if storage_path != ":memory:":
        Path(storage_path).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{storage_path}",

        # Connections are handed to whichever worker thread serves the request
        connect_args={"check_same_thread": False},

        # SQL echo - useful for debugging
        echo=echo,
    )
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    """Create the session factory bound to ``engine``."""
    return sessionmaker(
        autocommit=False,  # Don't auto-commit transactions
        autoflush=False,   # Don't auto-flush before queries
        bind=engine,
        expire_on_commit=False  # Keep attribute values readable after commit
    )


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables(engine: Engine):
    """
    Create all tables defined in models, skipping those that already exist.
    """
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database tables ready")


def check_database_connection(engine: Engine) -> None:
    """Open a connection and run a trivial query; raises on failure."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))

