"""Security and authentication middleware."""

import logging
import secrets

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import settings

logger = logging.getLogger(__name__)

# Docs and the bare root stay public; versioned endpoints do not
PUBLIC_PATHS = frozenset({"/", "/health", "/docs", "/openapi.json", "/redoc"})


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Middleware to validate API key if configured."""

    async def dispatch(self, request: Request, call_next):
        """Validate API key for protected endpoints."""
        if request.url.path in PUBLIC_PATHS or not settings.api_key:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key")
        if not api_key:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={
                    "detail": (
                        "Missing X-API-Key header. Please provide API key for authentication."
                    )
                },
            )

        if not secrets.compare_digest(api_key.encode(), settings.api_key.encode()):
            logger.warning("Rejected request to %s: invalid API key", request.url.path)
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid API key. Please check your X-API-Key header."},
            )

        return await call_next(request)
