"""
Database configuration and connection management for Scriptorium.

This module provides:
- Database URL resolution from settings and the environment
- Engine creation with SQLite and server-database specific options
- Session factory for repositories
- Creation of the tables for all defined models

SQLite is the default for development and tests; any SQLAlchemy URL can be
supplied through ``DATABASE_URL``.
"""

from typing import Optional
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool, StaticPool
from dotenv import load_dotenv

from scriptorium.models.base import Base
# Import all models to ensure they are registered
from scriptorium.models.users import Users  # noqa: F401
from scriptorium.utils.config import Settings
from scriptorium.utils.logger import get_logger

# Load environment variables from .env file
load_dotenv()

logger = get_logger(__name__)

IN_MEMORY_SQLITE_URL = "sqlite://"
DEFAULT_DATABASE_URL = "sqlite:///scriptorium.db"

def get_database_url(settings: Optional[Settings] = None) -> str:
    """
    Get database URL based on environment.

    Args:
        settings: Settings to read from. Loaded from the environment if omitted.

    Returns:
        str: Database connection URL
    """
    settings = settings or Settings()

    # For testing, always use in-memory SQLite
    if settings.TESTING:
        logger.info("Using in-memory SQLite database for testing")
        return IN_MEMORY_SQLITE_URL

    # Fix potential newline issues in .env file
    db_url = (settings.DATABASE_URL or "").split('\n')[0].strip()
    if not db_url:
        logger.warning("No DATABASE_URL found, falling back to SQLite")
        return DEFAULT_DATABASE_URL

    db_type = "SQLite" if db_url.startswith("sqlite") else make_url(db_url).get_backend_name()
    logger.info(f"Using {db_type} database for {settings.ENVIRONMENT}")
    return db_url

def is_in_memory_sqlite(database_url: str) -> bool:
    """Whether the URL points at a private in-memory SQLite database."""
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")

def get_engine(database_url: Optional[str] = None, settings: Optional[Settings] = None) -> Engine:
    """
    Get SQLAlchemy engine configured for the database type.

    In-memory SQLite shares one connection through ``StaticPool`` so every
    session sees the same tables. File SQLite opens a fresh connection per
    session with ``NullPool``.

    Args:
        database_url (str, optional): Database URL. If None, determined from settings.
        settings (Settings, optional): Settings for URL resolution and SQL echo.

    Returns:
        Engine: Configured SQLAlchemy engine
    """
    settings = settings or Settings()
    if database_url is None:
        database_url = get_database_url(settings)

    connect_args = {}
    engine_args = {
        "echo": settings.DEBUG,
    }

    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if is_in_memory_sqlite(database_url):
            engine_args["poolclass"] = StaticPool
            logger.debug("Using StaticPool for in-memory SQLite database")
        else:
            engine_args["poolclass"] = NullPool
            logger.debug("Using NullPool for SQLite database")
    else:
        # Verify connections before using them
        engine_args["pool_pre_ping"] = True

    return create_engine(
        database_url,
        connect_args=connect_args,
        **engine_args
    )

def get_session_local(engine: Optional[Engine] = None) -> sessionmaker:
    """
    Get SQLAlchemy session factory.

    Args:
        engine (Engine, optional): SQLAlchemy engine. If None, a new engine is created.

    Returns:
        sessionmaker: Configured SQLAlchemy session factory
    """
    if engine is None:
        engine = get_engine()

    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False
    )

def init_db(engine: Engine) -> None:
    """Create the tables for all models if they do not exist yet."""
    try:
        Base.metadata.create_all(bind=engine)
        logger.info(f"Initialized database tables at {engine.url!r}")
    except SQLAlchemyError as e:
        logger.error(f"Error initializing database: {str(e)}")
        raise

def drop_db(engine: Engine) -> None:
    """Drop the tables for all models."""
    Base.metadata.drop_all(bind=engine)
    logger.info("Dropped database tables")

def check_connection(engine: Engine) -> bool:
    """
    Test the database connection by executing a simple query.

    Args:
        engine (Engine): Engine to test

    Returns:
        bool: True if the connection is successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            result = connection.execute(text("SELECT 1"))
            if result.scalar() == 1:
                logger.info("Database connection successful")
                return True
            logger.error("Database connection test failed: unexpected result")
            return False
    except SQLAlchemyError as e:
        logger.error(f"Database connection test failed: {str(e)}")
        return False
