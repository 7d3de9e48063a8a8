import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lexdrill import __version__
from lexdrill.core.config import settings
from lexdrill.db import session as db_session
from lexdrill.db.base import Base
from lexdrill.api.v2.api import api_router

# --- Logging ---
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _sanitize_origin(origin: str | None) -> str | None:
    if not origin:
        return None
    value = origin.strip()
    if not value:
        return None
    if not value.startswith("http"):
        value = f"https://{value}"
    return value.rstrip("/")


def _build_cors_origins() -> list[str]:
    origins = {_sanitize_origin(o) for o in settings.BACKEND_CORS_ORIGINS}
    allow_origins = sorted({origin for origin in origins if origin})
    logger.info("CORS origins: %s", allow_origins)
    return allow_origins


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info("Creating database tables if needed (%s)...", settings.ENVIRONMENT)
    Base.metadata.create_all(bind=db_session.engine)
    logger.info("Database tables ready.")
    yield


app = FastAPI(
    title="lexdrill API",
    version=__version__,
    openapi_url="/api/v2/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_build_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["Authorization", "Content-Type"],
)

app.include_router(api_router, prefix="/api/v2")


@app.get("/")
def read_root():
    return {"message": "Welcome to the lexdrill API!"}
