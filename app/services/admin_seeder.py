"""
Admin account seeder
Runs once at startup, after the database connection succeeds
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import Settings, settings as default_settings
from app.core.database import SessionLocal
from app.core.security import hash_password
from app.models.user import User, UserRole

logger = logging.getLogger(__name__)


def seed_admin(db: Optional[Session] = None, config: Optional[Settings] = None) -> User:
    """
    Make sure the configured admin account exists.

    Existing accounts are left untouched (password included), so running
    this on every start is safe. Returns the admin user.
    """
    config = config or default_settings
    owns_session = db is None
    db = db or SessionLocal()
    email = config.ADMIN_EMAIL.strip().lower()

    try:
        admin = db.query(User).filter(User.email == email).first()
        if admin:
            logger.info("ℹ️ Admin account already exists: %s", email)
            return admin

        admin = User(
            name=config.ADMIN_NAME,
            email=email,
            password_hash=hash_password(config.ADMIN_PASSWORD),
            role=UserRole.ADMIN.value,
            is_active=True,
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)
        logger.info("✅ Admin account created: %s", email)
        return admin
    finally:
        if owns_session:
            db.close()
