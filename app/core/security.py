"""
Password hashing and JWT helpers shared by the auth-protected routers
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.core.config import Settings, settings as default_settings
from app.core.database import get_db
from app.core.errors import AuthenticationError, PermissionDeniedError
from app.models.user import User, UserRole

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def app_settings(request: Request) -> Settings:
    """Settings the running app was built with"""
    return getattr(request.app.state, "settings", default_settings)


def create_access_token(user: User, config: Optional[Settings] = None) -> str:
    """Signed JWT for a user, valid for JWT_EXPIRY_DAYS"""
    config = config or default_settings
    expire = datetime.now(timezone.utc) + timedelta(days=config.JWT_EXPIRY_DAYS)
    payload = {
        "sub": user.id,
        "email": user.email,
        "role": user.role,
        "exp": expire,
    }
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    config: Settings = Depends(app_settings),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise AuthenticationError("Authentication required")

    try:
        payload = jwt.decode(
            credentials.credentials,
            config.JWT_SECRET_KEY,
            algorithms=[config.JWT_ALGORITHM],
        )
    except JWTError:
        raise AuthenticationError("Invalid or expired token")

    user = db.query(User).filter(User.id == payload.get("sub")).first()
    if not user or not user.is_active:
        raise AuthenticationError("User not found or inactive")
    return user


def require_roles(*roles: UserRole):
    """Dependency factory: allow only users holding one of the given roles"""
    allowed = {role.value for role in roles}

    def dependency(user: User = Depends(get_current_user)) -> User:
        if user.role not in allowed:
            raise PermissionDeniedError("You do not have permission to access this resource")
        return user

    return dependency
