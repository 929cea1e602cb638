import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from treescaffold.middleware.auth import TokenAuthMiddleware
from treescaffold.rate_limit import limiter
from treescaffold.routers.generate import router as generate_router
from treescaffold.routers.parse import router as parse_router
from treescaffold.routers.templates import router as templates_router

app = FastAPI(title="Tree Scaffold API", version="0.1.0")

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Token is read per request.
app.add_middleware(TokenAuthMiddleware)

# CORS: load origins from env (comma-separated), default to localhost dev server
_cors_env = os.environ.get("CORS_ORIGINS", "http://localhost:5173")
cors_origins = [o.strip() for o in _cors_env.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    return response


app.include_router(parse_router)
app.include_router(generate_router)
app.include_router(templates_router)


@app.get("/api/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}

