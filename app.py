from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from slowapi import _rate_limit_exceeded_handler, errors

# Import core modules
import config
from core_logic import logger
from encoding import get_codec
from limiter import limiter
from router import api_router

# --- LIFESPAN AND APP SETUP ---

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    try:
        config.get_settings()
        codec = get_codec()
        logger.info(f"Application started successfully with {codec!r}")
        yield
    finally:
        logger.info("Application shutdown complete")

# Main app instance
app = FastAPI(
    title="idcodec",
    lifespan=lifespan
)

# --- MIDDLEWARE ---
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(errors.RateLimitExceeded, _rate_limit_exceeded_handler)

app.include_router(api_router)

# --- MONITORING ---

@app.get("/health", summary="Health Check", tags=["Monitoring"])
async def health_check():
    """Checks that the process-wide codec can be built from the current settings."""
    health_status = {"status": "ok", "services": {}}
    status_code = 200

    try:
        get_codec()
        health_status["services"]["codec"] = "ok"
    except ValueError as e:
        logger.error(f"Codec health check failed: {e}")
        health_status["services"]["codec"] = "error"
        health_status["status"] = "error"
        status_code = 503

    return JSONResponse(content=health_status, status_code=status_code)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=8000, log_level=config.LOG_LEVEL.lower())
