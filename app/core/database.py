"""
Database connection and session management
"""
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings
from app.core.errors import DatabaseConnectionError

logger = logging.getLogger(__name__)

# SQLite needs cross-thread access since FastAPI runs sync routes in a threadpool
connect_args = {}
if "sqlite" in settings.DATABASE_URL:
    connect_args = {"check_same_thread": False}

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=True,
    pool_recycle=300,
    echo=settings.DB_ECHO
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency to get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_connection():
    """Open a connection once; the process must not serve without a database"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("❌ Database connection error: %s", e)
        raise DatabaseConnectionError(str(e)) from e
    logger.info("✅ Database connected successfully")


def init_db():
    """Initialize database tables"""
    from app.models import user  # noqa: F401
    Base.metadata.create_all(bind=engine)
