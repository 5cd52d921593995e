from typing import Sequence, Tuple

from fastapi import APIRouter, FastAPI
from app.api.routes import (
    auth, candidates, onboarding, employees, admin,
    chatbot, hr_database, prompts, learning,
)

API_PREFIX = "/api"

RouteTable = Sequence[Tuple[str, APIRouter]]

# Mount order is kept as listed; prefixes are distinct single segments
API_ROUTES: RouteTable = (
    (f"{API_PREFIX}/auth", auth.router),
    (f"{API_PREFIX}/candidates", candidates.router),
    (f"{API_PREFIX}/onboarding", onboarding.router),
    (f"{API_PREFIX}/employees", employees.router),
    (f"{API_PREFIX}/admin", admin.router),
    (f"{API_PREFIX}/chatbot", chatbot.router),
    (f"{API_PREFIX}/hr-database", hr_database.router),
    (f"{API_PREFIX}/prompts", prompts.router),
    (f"{API_PREFIX}/learning", learning.router),
)


def include_api_routes(app: FastAPI, routes: RouteTable = API_ROUTES):
    for prefix, router in routes:
        app.include_router(router, prefix=prefix)
