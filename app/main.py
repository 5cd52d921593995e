"""
WinOnboard Backend
==================
HR onboarding API, optionally serving the built React frontend

Request pipeline (outermost first):
1. CORS policy for the deployment mode
2. JSON / form body size limit
3. Static mounts: /uploads, /documents, /assets
4. API routers under /api/...
5. Single-service only: React build + SPA fallback
6. Error envelope for any fault (inside the CORS layer)
"""
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import API_ROUTES, RouteTable, include_api_routes
from app.core.config import Settings, settings as default_settings
from app.core.database import check_connection, init_db
from app.core.deployment import ServerConfig, build_cors_rule, parse_origins
from app.core.errors import register_error_handlers
from app.core.middleware import BodyLimitMiddleware, ErrorEnvelopeMiddleware
from app.services.admin_seeder import seed_admin
from app.web.spa import register_spa_fallback
from app.web.static import mount_static_assets

logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("passlib").setLevel(logging.ERROR)

logger = logging.getLogger("winonboard")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect to the database and seed before accepting traffic"""
    server: ServerConfig = app.state.server
    check_connection()
    init_db()
    seed_admin(config=app.state.settings)

    logger.info("🚀 Server running on %s:%s", server.host, server.port)
    if server.is_combined:
        logger.info("📱 Single Service Mode: Frontend + Backend on same port")
    else:
        logger.info("⚡ Separate Services Mode: Backend only")
    yield
    logger.info("👋 Shutting down...")


def create_app(settings: Optional[Settings] = None, routes: RouteTable = API_ROUTES) -> FastAPI:
    """
    Build the HTTP surface for one deployment.

    Mode, CORS, directories, body limit, error detail and JWT signing follow
    the given settings. The database engine is process-wide and always uses
    DATABASE_URL from the environment.
    """
    settings = settings or default_settings
    server = ServerConfig.from_settings(settings)
    cors_rule = build_cors_rule(server.mode, parse_origins(settings.ALLOWED_ORIGINS))

    logger.info(
        "🔍 Deployment Mode: %s",
        "🔗 SINGLE SERVICE (Frontend+Backend)" if server.is_combined else "⚡ SEPARATE SERVICES",
    )

    app = FastAPI(
        title=settings.APP_NAME,
        description="HR onboarding platform API: auth, candidates, onboarding, employees and learning.",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.server = server
    app.state.cors_rule = cors_rule

    # Starlette wraps middleware in reverse order: CORS ends up outermost
    app.add_middleware(BodyLimitMiddleware, max_body_size=settings.MAX_BODY_SIZE)
    app.add_middleware(ErrorEnvelopeMiddleware, expose_detail=settings.is_development)
    app.add_middleware(CORSMiddleware, **cors_rule.middleware_options())
    if server.is_combined:
        logger.info("✅ CORS configured for single-service deployment")
    else:
        logger.info("✅ CORS enabled for origins: %s", list(cors_rule.allow_origins))

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "OK", "message": "Server is running"}

    mount_static_assets(app, settings)
    include_api_routes(app, routes)

    # Catch-all: only after every mount and API route is in place
    if server.is_combined:
        register_spa_fallback(app, settings.FRONTEND_BUILD_DIR)

    register_error_handlers(app, expose_detail=settings.is_development)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.is_development,
    )
