"""
Admin API Endpoints
Account management, restricted to admin users
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import AppError
from app.core.security import hash_password, require_roles
from app.models.user import User, UserRole
from app.schemas.user import UserCreate, UserListResponse, UserResponse

router = APIRouter(tags=["Admin"])

admin_only = require_roles(UserRole.ADMIN)


@router.get("/users", response_model=UserListResponse)
def list_users(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _: User = Depends(admin_only),
):
    users = db.query(User).order_by(User.created_at).offset(skip).limit(limit).all()
    return UserListResponse(
        count=len(users),
        data=[UserResponse.model_validate(u) for u in users],
    )


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    _: User = Depends(admin_only),
):
    """Create an HR, employee or candidate account"""
    if db.query(User).filter(User.email == user_data.email).first():
        raise AppError("A user with this email already exists", status_code=409)

    user = User(
        name=user_data.name,
        email=user_data.email,
        password_hash=hash_password(user_data.password),
        role=user_data.role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
