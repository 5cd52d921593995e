"""
Configuration settings for the WinOnboard backend
Values come from the environment (or .env) and are read once at startup
"""
from pathlib import Path
from pydantic_settings import BaseSettings
from typing import Optional


PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "WinOnboard Backend"
    ENVIRONMENT: str = "development"  # "production" forces single-service mode
    SINGLE_SERVICE: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    # CORS (separate services only), comma separated
    ALLOWED_ORIGINS: Optional[str] = None

    # Database
    DATABASE_URL: str = "sqlite:///./winonboard.db"
    DB_ECHO: bool = False

    # Static directories
    UPLOADS_DIR: str = str(PROJECT_ROOT / "uploads")
    DOCUMENTS_DIR: str = str(PROJECT_ROOT / "documents")
    ASSETS_DIR: str = str(PROJECT_ROOT / "assets")
    FRONTEND_BUILD_DIR: str = str(PROJECT_ROOT.parent / "frontend" / "build")

    # JSON and form bodies
    MAX_BODY_SIZE: int = 50 * 1024 * 1024

    # Seeded admin account
    ADMIN_EMAIL: str = "admin@winonboard.com"
    ADMIN_PASSWORD: str = "Admin@123"
    ADMIN_NAME: str = "System Administrator"

    # JWT
    JWT_SECRET_KEY: str = "winonboard-dev-secret-change-in-prod"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRY_DAYS: int = 7

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
