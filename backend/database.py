from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker
from fastapi import Request
from config import settings


# Base class for models
Base = declarative_base()


def normalize_database_url(database_url: str) -> str:
    """Render provides postgres:// but SQLAlchemy needs postgresql://"""
    if database_url.startswith("postgres://"):
        return database_url.replace("postgres://", "postgresql://", 1)
    return database_url


def create_db_engine(database_url: str = None, echo: bool = None) -> Engine:
    """
    Build a SQLAlchemy engine. The caller owns it and must dispose it on shutdown.
    """
    url = normalize_database_url(database_url or settings.DATABASE_URL)
    if echo is None:
        echo = settings.DEBUG

    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=echo
        )

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=300,
        echo=echo
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create session factory bound to the given engine"""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """Dependency for getting database session"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
