import logging
from typing import Optional

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session

from .config import SESSION_COOKIE
from .db import get_db
from .models import AuthSession, User
from .utils.validators import utcnow

logger = logging.getLogger(__name__)

# Sessions are issued by the external login service; this side only reads them
session_cookie = APIKeyCookie(name=SESSION_COOKIE, auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


def get_current_user(
    sid: Optional[str] = Security(session_cookie),
    db: Session = Depends(get_db),
) -> User:
    if not sid:
        raise _unauthorized()

    session = db.get(AuthSession, sid)
    if session is None:
        logger.info("Rejected unknown session")
        raise _unauthorized()
    if session.expire <= utcnow():
        logger.info("Rejected expired session for user id=%s", session.user_id)
        raise _unauthorized()

    user = db.get(User, session.user_id)
    if user is None:
        raise _unauthorized()
    return user
