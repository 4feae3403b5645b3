import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import models  # noqa: F401
from .config import ALLOWED_ORIGINS, LOG_LEVEL, SECURITY_HEADERS_ENABLED
from .database import Base, SessionLocal, engine
from .domain.admin.router import router as admin_router
from .domain.admin.service import seed_default_admin
from .domain.appointments.router import router as appointments_router
from .rate_limiter import get_redis_client, rate_limit_api
from .security_headers import SecurityHeadersMiddleware

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except Exception as e:
        # Ignore "already exists" errors from race conditions between workers
        error_msg = str(e)
        if "already exists" in error_msg or "duplicate key" in error_msg:
            logger.info("Database tables already exist (created by another worker)")
        else:
            logger.error(f"Failed to create database tables: {e}")
            raise

    db = SessionLocal()
    try:
        seed_default_admin(db)
    finally:
        db.close()

    get_redis_client()

    yield
    logger.info("Application shutting down...")


app = FastAPI(title="Carpet Cleaning Booking API", version="1.0.0", lifespan=lifespan)


def format_validation_errors(exc: RequestValidationError) -> str:
    """Turn pydantic errors into one readable sentence, e.g. 'Field required at "email"'"""
    parts = []
    for error in exc.errors():
        loc = [str(p) for p in error.get("loc", ()) if p not in ("body", "path", "query")]
        msg = error.get("msg", "Invalid value").removeprefix("Value error, ")
        parts.append(f'{msg} at "{".".join(loc)}"' if loc else msg)
    return "Validation error: " + "; ".join(parts)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = format_validation_errors(exc)
    logger.warning(f"Validation error for {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"message": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": "Internal server error."})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    path = request.url.path
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"{request.method} {path} - Error: {str(e)}")
        raise

    if path.startswith("/api"):
        duration_ms = int((time.time() - start) * 1000)
        logger.info(f"{request.method} {path} {response.status_code} in {duration_ms}ms")
    return response


if SECURITY_HEADERS_ENABLED:
    app.add_middleware(SecurityHeadersMiddleware, exclude_paths=["/health", "/docs", "/openapi.json"])
    logger.info("Security headers enabled")
else:
    logger.warning("Security headers DISABLED - only use in development!")

logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,  # Bearer tokens, no cookies
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)

# Routes
app.include_router(admin_router, dependencies=[Depends(rate_limit_api)])
app.include_router(appointments_router, dependencies=[Depends(rate_limit_api)])


@app.get("/")
def root():
    return {"message": "Carpet Cleaning Booking API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
