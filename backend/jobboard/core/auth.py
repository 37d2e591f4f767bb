"""Bearer-token authentication utilities.

Tokens are issued by the identity provider in front of this service; this
module only verifies them and resolves the user they name.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from jobboard.core.config import settings
from jobboard.db import User, get_db

security = HTTPBearer()

ROLE_JOB_SEEKER = "JOB_SEEKER"
ROLE_EMPLOYER = "EMPLOYER"
ROLE_ADMIN = "ADMIN"


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Create access token for a user id."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode = {"sub": str(user_id), "exp": expire, "type": "access"}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str) -> int:
    """Decode token and return the user id it carries."""
    credentials_error = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
    )
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        raise credentials_error
    subject = payload.get("sub")
    if subject is None or payload.get("type") != "access":
        raise credentials_error
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise credentials_error


def _load_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Inactive user",
        )
    return user


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Get current user from token."""
    return _load_user(db, decode_token(credentials.credentials))


def require_role(allowed_roles: list[str]):
    """Dependency factory requiring one of the given roles."""

    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Required role: {', '.join(allowed_roles)}",
            )
        return current_user

    return role_checker


require_job_seeker = require_role([ROLE_JOB_SEEKER])
require_employer = require_role([ROLE_EMPLOYER, ROLE_ADMIN])
