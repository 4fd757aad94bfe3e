from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from hourbook.core.config import settings
from hourbook.core.errors import ConfigurationError

# SQLAlchemy Base class for models to inherit
Base = declarative_base()


def make_engine(database_url: str | None):
    """Create an engine for `database_url`, failing fast when it is missing."""
    if not database_url:
        raise ConfigurationError("DATABASE_URL is not set")

    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        # A single shared connection keeps an in-memory database alive
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)

    return create_engine(
        database_url,
        pool_pre_ping=True,   # helps avoid stale connections
    )


engine = make_engine(settings.database_url)

# Factory that creates DB sessions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency we will use in FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
