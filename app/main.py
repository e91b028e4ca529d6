import logging
import logging.config
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.routers.analyze import limiter, router as analyze_router
from app.routers.fetch import router as fetch_router

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": "INFO", "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="UI/UX Analyzer API",
    description=(
        "Fetches a page with its stylesheets inlined, summarizes its design, "
        "structure and accessibility, and reduces it to a clean template for redesign."
    ),
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(fetch_router)
app.include_router(analyze_router)


@app.get("/health", summary="Health check")
async def health() -> dict:
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}
