"""Database configuration and session management."""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from company_directory.config import settings

# Database URL — derived from DATA_ROOT / settings.database_url.
# The model_validator in Settings always populates this field after init.
assert settings.database_url is not None, "database_url must be set in Settings"
DATABASE_URL: str = settings.database_url


def engine_options_for(url: str, timeout_seconds: float) -> dict:
    """
    Build ``create_engine`` keyword arguments that bound every store call.

    Args:
        url: Database URL
        timeout_seconds: Upper bound for a single store call

    Returns:
        Keyword arguments for ``create_engine``
    """
    options: dict = {"pool_timeout": timeout_seconds}
    if url.startswith("sqlite"):
        # check_same_thread: FastAPI hands sessions to worker threads.
        # timeout: how long a write waits on the SQLite lock before "database is locked".
        options["connect_args"] = {"check_same_thread": False, "timeout": timeout_seconds}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # In-memory databases use a single-connection pool without checkout timeouts
            del options["pool_timeout"]
    elif url.startswith("postgresql"):
        # Server-side limits so row-lock waits and slow statements are cancelled
        ms = int(timeout_seconds * 1000)
        options["connect_args"] = {
            "options": f"-c statement_timeout={ms} -c lock_timeout={ms}"
        }
    return options


# Create SQLAlchemy engine
engine = create_engine(
    DATABASE_URL,
    echo=False,  # Set to True for SQL query logging during development
    **engine_options_for(DATABASE_URL, settings.store_timeout_seconds),
)

# Create SessionLocal class for database sessions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for declarative models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
