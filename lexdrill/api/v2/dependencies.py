from typing import Generator

from sqlalchemy.orm import Session

from lexdrill.db import session as db_session


def get_db() -> Generator[Session, None, None]:
    """Provide one SQLAlchemy session per request, closed once it completes."""

    db = db_session.SessionLocal()
    try:
        yield db
    finally:
        db.close()
