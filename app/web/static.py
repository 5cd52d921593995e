"""
Static file mounts for uploads, generated documents and shared assets
Served in every deployment mode
"""
from pathlib import Path
from typing import Tuple

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.core.config import Settings


def static_mounts(settings: Settings) -> Tuple[Tuple[str, str], ...]:
    """(prefix, directory) pairs, in mount order"""
    return (
        ("/uploads", settings.UPLOADS_DIR),
        ("/documents", settings.DOCUMENTS_DIR),
        ("/assets", settings.ASSETS_DIR),
    )


def mount_static_assets(app: FastAPI, settings: Settings):
    for prefix, directory in static_mounts(settings):
        # Upload handlers write here, so the folder is created rather than required
        Path(directory).mkdir(parents=True, exist_ok=True)
        app.mount(prefix, StaticFiles(directory=directory), name=prefix.strip("/"))
