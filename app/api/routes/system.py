from fastapi import APIRouter, Request

from api.dependencies.rate_limits import get_limiter
from core.config import settings

router = APIRouter(tags=["System"])
limiter = get_limiter()


# Container healthchecks poll these; the limit leaves room for frequent probes
@router.get("/version")
@limiter.limit("50/minute")
def get_version(request: Request):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit("50/minute")
def get_health(request: Request):
    """Healthcheck endpoint.

    Reports whether the Discord client is connected; the HTTP server itself
    answering is enough for ``status: ok``.
    """
    bot = getattr(request.app.state, "bot", None)
    return {
        "status": "ok",
        "discord": "connected" if bot is not None and bot.is_ready() else "offline",
    }
