"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import insurance_plans
from app.core.config import settings
from app.core.logging import get_logger, setup_logging
from app.filtering import FilterValidationError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging(settings.effective_log_level, settings.LOG_FORMAT)
    logger = get_logger("startup")
    logger.info("Application starting", env=settings.APP_ENV)
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Insurance Plans API",
    description="CRUD and filtered search over insurance plan records",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FilterValidationError)
async def filter_validation_error_handler(request: Request, exc: FilterValidationError) -> JSONResponse:
    """Report every rejected filter parameter in one 400 response."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": exc.errors.joined(),
            "errors": [issue.to_dict() for issue in exc.errors.issues],
        },
    )


API_PREFIX = "/api/v1"
app.include_router(insurance_plans.router, prefix=API_PREFIX)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
