"""API dependencies for bearer token authentication."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from voltshare.core.database import get_db
from voltshare.models.user import User
from voltshare.services.auth import decode_token, get_user_by_email

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_optional(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User | None:
    """Get the current user if a valid bearer token was sent."""
    if credentials is None:
        return None
    token_data = decode_token(credentials.credentials)
    return get_user_by_email(db, token_data.email or "")


def get_current_user(
    user: User | None = Depends(get_current_user_optional),
) -> User:
    """Require an authenticated, active user."""
    if user is None or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
