# backend/app/api/auth.py

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from datetime import datetime, timedelta
from typing import Optional
import logging

from ..database import get_db
from ..models.user import User
from ..schemas.user import UserIdentity, UserResponse, TokenData
from ..schemas.storage import SuccessResponse
from .. import crud
from app.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> TokenData:
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    return TokenData(open_id=payload.get("sub"))


def _cookie_kwargs() -> dict:
    return {
        "httponly": True,
        "secure": settings.COOKIE_SECURE,
        "samesite": "lax",
        "path": "/",
    }


def sign_in(db: Optional[Session], response: Response, identity: UserIdentity) -> User:
    """Record a successful identity-provider login and issue the session cookie.

    Called by the identity-provider callback once it has verified the
    caller; creates the user on first sign-in.
    """
    identity = identity.model_copy(update={"last_signed_in": datetime.utcnow()})
    user = crud.user.upsert_user(db, identity)
    token = create_access_token({"sub": user.open_id})
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        **_cookie_kwargs(),
    )
    logger.info("User %s signed in via %s", user.id, user.login_method or "unknown")
    return user


def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Optional[Session] = Depends(get_db),
) -> Optional[User]:
    """Resolve the caller from a Bearer token or the session cookie, if any."""
    token = credentials.credentials if credentials else request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    try:
        token_data = decode_access_token(token)
    except JWTError:
        logger.info("Rejected invalid session token")
        return None
    if not token_data.open_id:
        return None
    return crud.user.get_user_by_open_id(db, token_data.open_id)


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


@router.get("/me", response_model=Optional[UserResponse])
def read_me(current_user: Optional[User] = Depends(get_optional_user)):
    """Return the signed-in user, or ``null`` for anonymous callers."""
    return current_user


@router.post("/logout", response_model=SuccessResponse)
def logout(response: Response, current_user: User = Depends(get_current_user)):
    response.delete_cookie(settings.SESSION_COOKIE_NAME, **_cookie_kwargs())
    logger.info("User %s signed out", current_user.id)
    return {"success": True}
