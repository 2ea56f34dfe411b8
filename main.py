import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.main import api_router
from app.core.config import settings
from app.core.errors import AppError, ConfigurationError, UNEXPECTED_ERROR_MESSAGE
from app.core.session import SessionEvents, log_session_change

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s (%s)", settings.PROJECT_NAME, settings.ENVIRONMENT)
    yield
    app.state.session_events.teardown()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description="FastAPI backend for the WorkFlow Bot freelance marketplace",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

app.state.session_events = SessionEvents()
app.state.session_events.subscribe(log_session_change)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, ConfigurationError):
        logger.error("Configuration error: %s", exc.reason)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": UNEXPECTED_ERROR_MESSAGE})


# Include API router
app.include_router(api_router, prefix=settings.API_V1_STR)

# Locally stored attachments
if settings.STORAGE_TYPE.lower() == "local":
    app.mount(
        settings.PUBLIC_FILES_URL,
        StaticFiles(directory=settings.UPLOAD_DIRECTORY, check_dir=False),
        name="files",
    )


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": "Welcome to WorkFlow Bot API"}


@app.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}
