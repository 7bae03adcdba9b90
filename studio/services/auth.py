"""Auth service: JWT, password hashing."""
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from studio.config import settings


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))


def get_password_hash(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def create_access_token(user_id: str, email: str, role: str, expires_in: timedelta | None = None) -> str:
    """Sign a bearer token carrying the user's identity and role."""
    now = datetime.now(timezone.utc)
    expire = now + (expires_in if expires_in is not None else timedelta(days=settings.jwt_expires_days))
    payload = {"sub": user_id, "email": email, "role": role, "iat": now, "exp": expire}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict | None:
    """Return the token claims, or None if the signature is bad or it has expired."""
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except JWTError:
        return None
    if not payload.get("sub"):
        return None
    return payload
