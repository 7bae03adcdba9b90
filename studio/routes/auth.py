"""Auth routes."""
import urllib.parse

from fastapi import APIRouter, Depends, HTTPException, status

from studio.database import get_db
from studio.logging_config import get_logger
from studio.models import User, UserRole
from studio.schemas.auth import RegisterRequest, LoginRequest, ChangePasswordRequest
from studio.schemas.common import envelope, dump
from studio.schemas.user import UserResponse, ProfileUpdate
from studio.services.auth import get_password_hash, verify_password, create_access_token
from studio.middleware.auth import get_current_user_required
from studio.utils import generate_id

router = APIRouter(prefix="/auth", tags=["auth"])
logger = get_logger("studio.auth")


def _token_for(user: User) -> str:
    return create_access_token(user.id, user.email, user.role)


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db=Depends(get_db)):
    existing = (
        db.query(User)
        .filter((User.email == data.email) | (User.username == data.username))
        .first()
    )
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email or username already exists",
        )
    default_avatar = (
        "https://ui-avatars.com/api/?"
        f"name={urllib.parse.quote(data.username)}&background=random&size=256"
    )
    user = User(
        id=generate_id(),
        email=data.email,
        username=data.username,
        hashed_password=get_password_hash(data.password),
        first_name=data.first_name,
        last_name=data.last_name,
        avatar=default_avatar,
        role=UserRole.USER.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return envelope(
        {"user": dump(UserResponse.model_validate(user)), "token": _token_for(user)},
        "User registered successfully",
    )


@router.post("/login")
def login(data: LoginRequest, db=Depends(get_db)):
    user = db.query(User).filter(User.email == data.email).first()
    if not user or not user.is_active or not verify_password(data.password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return envelope(
        {"user": dump(UserResponse.model_validate(user)), "token": _token_for(user)},
        "Login successful",
    )


@router.get("/me")
def me(user: User = Depends(get_current_user_required)):
    return envelope({"user": dump(UserResponse.model_validate(user))})


@router.put("/me")
def update_me(
    data: ProfileUpdate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return envelope({"user": dump(UserResponse.model_validate(user))}, "Profile updated successfully")


@router.put("/change-password")
def change_password(
    data: ChangePasswordRequest,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    if not verify_password(data.current_password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Current password is incorrect")
    user.hashed_password = get_password_hash(data.new_password)
    db.commit()
    logger.info("Password changed for user %s", user.id)
    return envelope(message="Password changed successfully")
