"""Main FastAPI application."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import plan_routes, tutorial_routes, user_routes
from config.settings import settings
from models.database import close_mongo_connection, init_mongo
from utils.errors import ServiceError
from utils.helpers import format_error_response
from utils.logger import setup_logger

logger = setup_logger(__name__)

AVAILABLE_ROUTES = ["/api/user/*", "/api/generate", "/api/tutorials", "/", "/health"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    logger.info("Starting application...")
    await init_mongo()
    logger.info("Application started successfully")

    yield

    logger.info("Shutting down application...")
    await close_mongo_connection()
    logger.info("Application shut down")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Fitness tracking API: accounts, workout logging, dashboard and AI plans",
    lifespan=lifespan,
)

frontend_origins = [
    "http://localhost:3000",  # React default
    "http://127.0.0.1:3000",
    "http://localhost:3001",
    "http://localhost:5173",  # Vite default
] + settings.cors_origins

# Remove duplicates while preserving order
unique_origins = list(dict.fromkeys(frontend_origins))
logger.info(f"CORS configured with origins: {unique_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=unique_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With", "Accept"],
    expose_headers=["Content-Type", "Authorization"],
    max_age=86400,
)


@app.middleware("http")
async def request_timeout_middleware(request: Request, call_next):
    """Answer 503 when a request runs past the configured time budget."""
    try:
        return await asyncio.wait_for(call_next(request), timeout=settings.request_timeout_seconds)
    except asyncio.TimeoutError:
        logger.error(f"Request timeout: {request.method} {request.url.path}")
        return JSONResponse(status_code=503, content=format_error_response(503, "Request timeout"))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Route not found: {request.method} {request.url.path}"
        logger.info(message)
        return JSONResponse(
            status_code=404,
            content=format_error_response(404, message, availableRoutes=AVAILABLE_ROUTES),
        )

    message = exc.detail if isinstance(exc.detail, str) else "Something went wrong"
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=format_error_response(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content=format_error_response(400, message))


@app.exception_handler(ServiceError)
async def service_exception_handler(request: Request, exc: ServiceError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=format_error_response(exc.status_code, exc.message),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=format_error_response(500, str(exc) or "Something went wrong"),
    )


app.include_router(user_routes.router)
app.include_router(plan_routes.router)
app.include_router(tutorial_routes.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "FitTrack API is running.", "version": settings.app_version}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
