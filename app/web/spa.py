"""
Single-page app fallback for single-service deployments

Serves the built React frontend from the backend process. Must be
registered after the static mounts and API routers: the catch-all route
answers everything that reaches it.
"""
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match
from starlette.types import Scope

from app.api import API_PREFIX
from app.core.errors import NotFoundError

logger = logging.getLogger(__name__)

ENTRY_DOCUMENT = "index.html"
BUILD_ASSET_CACHE = "public, max-age=86400"
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
CATCH_ALL_PATH = "/{full_path:path}"


def is_api_path(path: str) -> bool:
    return path == API_PREFIX or path.startswith(API_PREFIX + "/")


def resolve_build_file(build_dir: Path, relative: str) -> Optional[Path]:
    """File inside build_dir for a request path, or None (never escapes build_dir)"""
    if not relative:
        return None
    try:
        candidate = (build_dir / relative).resolve()
        if build_dir not in candidate.parents:
            return None
        if candidate.is_file():
            return candidate
    except (OSError, ValueError):
        # Null bytes and over-long names are just not build files
        return None
    return None


def slash_redirect_path(app: FastAPI, scope: Scope) -> Optional[str]:
    """
    Path without the trailing slash if a real route answers it, else None.

    Same rule as Starlette's redirect_slashes, which never fires while the
    catch-all matches everything.
    """
    path = scope["path"]
    if path == "/" or not path.endswith("/"):
        return None
    stripped = dict(scope, path=path.rstrip("/") or "/")
    for route in app.router.routes:
        if getattr(route, "path", None) == CATCH_ALL_PATH:
            continue
        match, _ = route.matches(stripped)
        if match is Match.FULL:
            return stripped["path"]
    return None


def register_spa_fallback(app: FastAPI, build_dir: str) -> bool:
    """
    Add the frontend catch-all route if a build exists.

    Returns False (and registers nothing) when the build directory is
    missing, leaving unmatched paths to the generic 404.
    """
    build_path = Path(build_dir).resolve()
    if not build_path.is_dir():
        logger.warning("⚠️ React build not found at %s", build_path)
        logger.warning("📋 To build frontend, run: cd frontend && npm run build")
        return False

    logger.info("📦 Serving React frontend from: %s", build_path)

    @app.api_route(CATCH_ALL_PATH, methods=ALL_METHODS, include_in_schema=False)
    async def spa_fallback(request: Request, full_path: str):
        if is_api_path(request.url.path):
            target = slash_redirect_path(app, request.scope)
            if target is not None:
                return RedirectResponse(url=str(request.url.replace(path=target)), status_code=307)
            return JSONResponse(
                status_code=404,
                content={"success": False, "message": "API endpoint not found"},
            )

        if request.method not in ("GET", "HEAD"):
            raise StarletteHTTPException(status_code=404)

        asset = resolve_build_file(build_path, full_path)
        if asset is not None:
            return FileResponse(asset, headers={"Cache-Control": BUILD_ASSET_CACHE})

        entry = build_path / ENTRY_DOCUMENT
        if not entry.is_file():
            raise NotFoundError("Frontend entry document not found")
        return FileResponse(entry)

    return True
