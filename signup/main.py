# signup/main.py
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from signup.core.config import settings
from signup.core.logging import configure_logging
from signup.registration.routes.register_routes import router as register_router


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

# ---------------------------------------------------------------------------
# FastAPI application instance
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="FastAPI microservice for user registration",
    debug=settings.DEBUG,
)

# ---------------------------------------------------------------------------
# CORS middleware
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(register_router)


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check():
    """
    Simple health check endpoint.
    Returns {"status": "ok"} when the service is running.
    """
    return {"status": "ok"}
