import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from core.config_loader import settings
from core.database import get_db
from person.models import Person

logger = logging.getLogger(__name__)

# login is handled by the identity provider; we only read bearer tokens
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token", auto_error=False)

def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

def create_access_token(person_id: int, expires_minutes: Optional[int] = None) -> str:
    minutes = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    now = datetime.now(timezone.utc)
    payload = {"sub": str(person_id), "iat": now, "exp": now + timedelta(minutes=minutes)}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

def decode_access_token(token: str) -> int:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("rejected expired access token")
        raise _credentials_exception()
    except jwt.InvalidTokenError:
        raise _credentials_exception()

    sub = payload.get("sub")
    try:
        return int(sub)
    except (TypeError, ValueError):
        raise _credentials_exception()

def get_current_person(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    ) -> Person:
    if not token:
        raise _credentials_exception()
    person_id = decode_access_token(token)
    person = db.get(Person, person_id)
    if person is None:
        raise _credentials_exception()
    return person
