"""
Deployment topology
Decides whether frontend and backend share one process and derives the
CORS rule that goes with it.
"""
import enum
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from app.core.config import Settings


PRODUCTION_TIER = "production"

DEFAULT_ALLOWED_ORIGINS: Tuple[str, ...] = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "https://winhronboard.azurewebsites.net",
)


class DeploymentMode(str, enum.Enum):
    COMBINED = "combined"  # Frontend + backend on the same origin
    SPLIT = "split"        # Frontend deployed separately


def resolve_mode(explicit_flag: bool, env_tier: str) -> DeploymentMode:
    """Combined if single-service is requested or we run in production"""
    if explicit_flag or env_tier == PRODUCTION_TIER:
        return DeploymentMode.COMBINED
    return DeploymentMode.SPLIT


def parse_origins(raw: Optional[str]) -> Tuple[str, ...]:
    """Split a comma separated origin list, dropping blanks"""
    if not raw:
        return ()
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class CorsRule:
    """
    Cross-origin rule applied to every request.

    Split mode carries an explicit allow-list. Combined mode accepts any
    origin through a match-all regex so Starlette echoes the caller's
    origin back, which keeps credentialed requests valid.
    """
    mode: DeploymentMode
    allow_origins: Tuple[str, ...] = ()
    allow_origin_regex: Optional[str] = None
    allow_credentials: bool = True

    def allows(self, origin: str) -> bool:
        if self.allow_origin_regex is not None:
            return True
        return origin in self.allow_origins

    def middleware_options(self) -> dict:
        return {
            "allow_origins": list(self.allow_origins),
            "allow_origin_regex": self.allow_origin_regex,
            "allow_credentials": self.allow_credentials,
            "allow_methods": ["*"],
            "allow_headers": ["*"],
        }


def build_cors_rule(
    mode: DeploymentMode,
    configured_origins: Optional[Iterable[str]] = None,
) -> CorsRule:
    if mode is DeploymentMode.COMBINED:
        return CorsRule(mode=mode, allow_origin_regex=".*")

    origins = tuple(o.strip() for o in (configured_origins or ()) if o.strip())
    return CorsRule(mode=mode, allow_origins=origins or DEFAULT_ALLOWED_ORIGINS)


@dataclass(frozen=True)
class ServerConfig:
    """Listen address and mode, resolved once at startup"""
    host: str
    port: int
    mode: DeploymentMode

    @property
    def is_combined(self) -> bool:
        return self.mode is DeploymentMode.COMBINED

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServerConfig":
        return cls(
            host=settings.HOST,
            port=settings.PORT,
            mode=resolve_mode(settings.SINGLE_SERVICE, settings.ENVIRONMENT),
        )
