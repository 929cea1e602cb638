"""Optional bearer-token authentication.

When TREE_SCAFFOLD_API_TOKEN is set, every /api/* path except /api/health
requires ``Authorization: Bearer <token>``.
"""

from __future__ import annotations

import os
import secrets

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

# Paths that don't require authentication
_PUBLIC_PATHS = {"/api/health"}


def get_api_token() -> str | None:
    return os.environ.get("TREE_SCAFFOLD_API_TOKEN") or None


class TokenAuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path

        # Only protect /api/* paths (not static files)
        if not path.startswith("/api/") or path in _PUBLIC_PATHS:
            return await call_next(request)

        token = get_api_token()
        if token is None:
            return await call_next(request)

        auth = request.headers.get("Authorization", "")
        # compare_digest only accepts ASCII str; headers arrive Latin-1 decoded
        if not secrets.compare_digest(auth.encode(), f"Bearer {token}".encode()):
            return JSONResponse(
                status_code=401,
                content={"detail": "Invalid or missing API token"},
            )

        return await call_next(request)
