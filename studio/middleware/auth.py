"""Auth dependencies for protected routes."""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from studio.database import get_db
from studio.models import User, UserRole
from studio.services.auth import decode_token

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _resolve_user(token: str, db) -> User | None:
    payload = decode_token(token)
    if not payload:
        return None
    user = db.query(User).filter(User.id == payload["sub"]).first()
    if not user or not user.is_active:
        return None
    return user


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db=Depends(get_db),
) -> User | None:
    """Get current user from JWT. Returns None if not authenticated or the token is bad."""
    if not credentials:
        return None
    return _resolve_user(credentials.credentials, db)


async def get_current_user_required(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db=Depends(get_db),
) -> User:
    """Require authenticated user. Raises 401 if the token is missing, invalid or expired."""
    if not credentials:
        raise _unauthorized("Access token required")
    user = _resolve_user(credentials.credentials, db)
    if not user:
        raise _unauthorized("Invalid or expired token")
    return user


def require_roles(*roles: UserRole):
    """Dependency factory: authenticated user whose role is in `roles`, else 403."""
    allowed = {r.value for r in roles}

    async def checker(user: User = Depends(get_current_user_required)) -> User:
        if user.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return user

    return checker


require_admin = require_roles(UserRole.ADMIN)


def ensure_owner_or_admin(owner_id: str, user: User, detail: str) -> None:
    """Raise 403 unless `user` owns the resource or is an admin."""
    if owner_id != user.id and not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
