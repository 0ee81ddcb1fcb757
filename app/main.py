# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import routes_depth_chart
from app.core.config import settings
from app.core.log import configure_logging
from app.middleware.cache_log import CacheHeaderLogMiddleware
from app.services.depth_chart import store

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings.validate_at_startup()
    if settings.SEED_ON_STARTUP:
        store.seed_data()
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.add_middleware(CacheHeaderLogMiddleware)

ALLOWED_ORIGINS = settings.CORS_ORIGINS
logger.info("CORS allow_origins = %s", ALLOWED_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=600,
)

# Routers
app.include_router(routes_depth_chart.router)


@app.get("/health")
def health():
    return {"ok": True, "env": settings.APP_ENV}
