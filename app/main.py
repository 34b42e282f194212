# Main application file



import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.database import engine, Base
from app.core.rate_limiter import limiter
from app.core.config import settings
from app.core.exceptions import ESGConnectError, StoreError
from app.routers import (
    auth,
    posts,
    investor,
    admin,
    internal_admin,
)


# LOGGING CONFIGURATION

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("app")


# DATABASE

@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info(f"ESG Connect API starting ({settings.ENV})")
    yield


# APP INIT

app = FastAPI(
    title="ESG Connect API",
    description="Connects sustainable businesses seeking investment with impact investors",
    version="1.0.0",
    lifespan=lifespan,
)



# CORS (Token-based auth)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


# RATE LIMITING

app.state.limiter = limiter
app.add_exception_handler(
    RateLimitExceeded,
    _rate_limit_exceeded_handler
)


# DOMAIN ERRORS

@app.exception_handler(ESGConnectError)
async def esg_connect_error_handler(request: Request, exc: ESGConnectError):
    content = {"detail": exc.message}

    if isinstance(exc, StoreError) and exc.error:
        content["error"] = exc.error

    return JSONResponse(status_code=exc.status_code, content=content)


# REQUEST LOGGING MIDDLEWARE

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    duration = round((time.time() - start_time) * 1000, 2)

    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Time: {duration}ms"
    )

    return response


# ROUTERS

app.include_router(auth.router)
app.include_router(posts.router)
app.include_router(investor.router)
app.include_router(admin.router)
app.include_router(internal_admin.router)



# ROOT

@app.get("/")
def root():
    logger.info("Health check endpoint called")
    return {"message": "ESG Connect API is running"}
