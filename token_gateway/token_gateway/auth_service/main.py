from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from contextlib import asynccontextmanager
import logging

from .config import settings
from .db import init_db
from .errors import AuthenticationError
from .routes import auth, health, users
from .schemas import ServiceInfo
from .tokens import TOKEN_HEADERS
from .utils.event_logger import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

UNAUTHENTICATED = "You need to sign in or sign up before continuing."


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Initialize database on startup"""
    init_db()
    yield


app = FastAPI(
    title=settings.SERVICE_NAME,
    version=settings.SERVICE_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=list(TOKEN_HEADERS),
)

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(health.router)


@app.exception_handler(AuthenticationError)
async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    # The reason is logged only; clients always get the same 401 body
    logger.info("Unauthenticated request: path=%s, reason=%s", request.url.path, exc.reason)
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"errors": [UNAUTHENTICATED]})


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Storage failure: path=%s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"errors": ["Internal server error"]}
    )


@app.get("/", response_model=ServiceInfo)
def root():
    return {
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "status": "running"
    }
