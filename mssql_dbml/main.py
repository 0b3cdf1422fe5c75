"""
mssql-dbml — SQL Server to DBML service
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mssql_dbml import __version__
from mssql_dbml.api import generate, health, render
from mssql_dbml.config import settings

# ── Logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("mssql_dbml")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("mssql-dbml starting up…")
    yield
    logger.info("mssql-dbml shutting down.")


# ── App ───────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="mssql-dbml",
    description="Generate DBML schema documents from Microsoft SQL Server databases.",
    version=__version__,
    lifespan=lifespan,
)

# ── CORS ──────────────────────────────────────────────────────────────────────
origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(health.router,   prefix="/api")
app.include_router(render.router,   prefix="/api")
app.include_router(generate.router, prefix="/api")


def run():
    import uvicorn
    uvicorn.run("mssql_dbml.main:app", host=settings.API_HOST, port=settings.API_PORT)
