"""
FastAPI dependencies.
"""

import logging
from typing import Generator, Optional

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from app.config import settings
from app.database import SessionLocal
from app.models.user import User

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    request: Request,
    db: Session = Depends(get_db)
) -> User:
    """
    Resolve the caller from the identity header set by the auth gateway.
    The user row is created on first sight and its email kept in sync.
    """
    user_id = (request.headers.get(settings.user_id_header) or "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Missing user identity.")

    email: Optional[str] = request.headers.get(settings.user_email_header) or None

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        user = User(id=user_id, email=email)
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Registered user %s", user_id)
    elif email and user.email != email:
        user.email = email
        db.commit()
        db.refresh(user)

    return user
