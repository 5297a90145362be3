from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base

Base = declarative_base()


def make_engine(url: str) -> Engine:
    # Only apply sqlite-specific connect_args when using sqlite
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}

    # pool_pre_ping drops stale connections before handing them out
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


def get_db(request: Request):
    """Yield a session bound to the pool owned by the running app."""
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
