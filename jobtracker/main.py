"""
FastAPI application entry point
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobtracker.app.api.v1.attachments import routes as attachments
from jobtracker.app.api.v1.jobs import routes as jobs
from jobtracker.app.core.config import settings
from jobtracker.app.core.exceptions import AppError
from jobtracker.app.core.logging_config import get_logger, setup_logging
from jobtracker.app.db.base import Base
from jobtracker.app.db.session import engine
from jobtracker.app.utils import response

# Import models so they register with Base.metadata
import jobtracker.app.models  # noqa: F401

setup_logging()
logger = get_logger("main")

# Create database tables (alembic/ holds the same schema for managed deployments)
Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(
    title="JobTracker API",
    description="Job application tracking API",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Accept", "Authorization", "Content-Type", "X-CSRF-Token"],
    expose_headers=["Link", "Content-Disposition"],
    max_age=300,
)

# Include routers
app.include_router(jobs.router, prefix="/api")
app.include_router(attachments.router, prefix="/api")


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """NotFound -> 404, AlreadyExists -> 409, InvalidInput -> 400, gateway -> 500"""
    return response.error(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = errors[0].get("msg", "") if errors else ""
    if errors and errors[0].get("loc"):
        field = ".".join(str(p) for p in errors[0]["loc"] if p != "body")
        if field:
            detail = f"{field}: {detail}"
    return response.error(f"Invalid request body: {detail}", 400)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return response.error(str(exc.detail), exc.status_code)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error %s %s", request.method, request.url.path)
    return response.error(str(exc), 500)


@app.get("/", include_in_schema=False)
def read_root():
    """Root endpoint"""
    return {"message": "JobTracker API", "version": settings.app_version}


@app.get("/health", response_class=PlainTextResponse)
def health_check():
    """Liveness probe"""
    return "OK"


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
