"""
Database engine, session factory and declarative base
"""
import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """
    Process-scoped database handle
    
    Created once at startup and passed to whatever needs sessions,
    instead of a module-level engine.
    """
    
    def __init__(self, url: str, echo: bool = False):
        engine_kwargs = {"echo": echo}
        if url.startswith("sqlite"):
            # In-memory SQLite must share one connection across threads
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True
        
        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
    
    def init_db(self) -> None:
        """Create all tables"""
        # Register models on Base.metadata
        from insect_shop import models  # noqa: F401
        
        Base.metadata.create_all(bind=self.engine)
    
    def drop_db(self) -> None:
        """Drop all tables"""
        Base.metadata.drop_all(bind=self.engine)
    
    def session(self) -> Session:
        """Open a new session"""
        return self.SessionLocal()
    
    def dispose(self) -> None:
        """Close all pooled connections"""
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a session bound to the application's database"""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()


def row_to_dict(row: Base) -> dict:
    """Plain column -> value mapping of a model instance"""
    return {column.key: getattr(row, column.key) for column in row.__table__.columns}
