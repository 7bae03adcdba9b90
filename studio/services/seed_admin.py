"""Seed admin user on startup."""
from studio.config import settings
from studio.database import SessionLocal
from studio.logging_config import get_logger
from studio.models import User, UserRole
from studio.services.auth import get_password_hash
from studio.utils import generate_id

logger = get_logger("studio.seed_admin")


def seed_admin_user() -> bool:
    """Ensure the configured admin account exists with the ADMIN role.

    Does nothing unless ADMIN_EMAIL and ADMIN_PASSWORD are set. Returns True
    when an account was created or promoted.
    """
    if not settings.admin_email or not settings.admin_password:
        return False
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == settings.admin_email).first()
        if user:
            if user.role == UserRole.ADMIN.value:
                return False
            user.role = UserRole.ADMIN.value
            db.commit()
            logger.info("Promoted %s to admin", user.email)
            return True
        user = User(
            id=generate_id(),
            email=settings.admin_email,
            username=settings.admin_username,
            hashed_password=get_password_hash(settings.admin_password),
            role=UserRole.ADMIN.value,
        )
        db.add(user)
        db.commit()
        logger.info("Created admin account %s", user.email)
        return True
    finally:
        db.close()
