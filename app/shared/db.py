import logging
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session

from app.shared.config import settings, STORAGE_DIR
from app.shared.errors import BackendError

logger = logging.getLogger(__name__)

# Local SQLite DB under ./storage/ unless DATABASE_URL points elsewhere
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    STORAGE_DIR.mkdir(parents=True, exist_ok=True)
    connect_args = {"check_same_thread": False}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

class Base(DeclarativeBase):
    pass

# FastAPI dep
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def commit(db: Session, action: str):
    """Commit the session; on failure roll back and raise BackendError."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("%s failed: %s", action, e)
        raise BackendError(f"{action} failed: {e.__class__.__name__}: {e}") from e
