# mfa_api/main.py

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from mfa_api.core.config import settings
from mfa_api.core.exceptions import MFALookupError

# Routers
from mfa_api.modules.mfa_methods.router import router as mfa_methods_router

logger = logging.getLogger("uvicorn.mfa_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application startup/shutdown lifecycle.
    Nothing is pooled or cached; Graph clients are per request.
    """
    logger.setLevel(settings.LOG_LEVEL)
    logger.info("Starting %s (%s)...", settings.APP_NAME, settings.ENVIRONMENT)
    if not settings.graph_configured:
        logger.warning("Graph credentials are not configured; lookups will return 500.")
    yield
    logger.info("Shutting down %s...", settings.APP_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------------------------------------------------
# ERROR BODY: {"error": "..."}
# -------------------------------------------------------------------
@app.exception_handler(MFALookupError)
async def mfa_lookup_error_handler(request: Request, exc: MFALookupError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )


# -------------------------------------------------------------------
# HEALTH CHECK
# -------------------------------------------------------------------
@app.get("/health", tags=["System"])
async def health_check():
    """
    Liveness probe. Does not call Graph.
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "ok",
            "components": {
                "graph_credentials": "configured" if settings.graph_configured else "missing",
            },
        },
    )


# -------------------------------------------------------------------
# API ROUTERS
# -------------------------------------------------------------------
API_PREFIX = "/api"

app.include_router(mfa_methods_router, prefix=API_PREFIX)
