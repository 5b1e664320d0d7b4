"""
Transmisiones API
FastAPI service that reconciles the programs scheduled for each branch with
the transmission reports stored in the backend.
"""

import logging
from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from transmisiones_api import __version__
from transmisiones_api.config import get_settings
from transmisiones_api.routers import filiales, programas, reportes, transmisiones

settings = get_settings()

# Setup logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ============================================================================
# STARTUP CONFIGURATION
# ============================================================================
logger.info("=" * 60)
logger.info("TRANSMISIONES-API STARTUP - Backend Configuration")
logger.info("=" * 60)
logger.info(f"BACKEND_API_URL: {settings.backend_url}")
logger.info(f"BACKEND_TIMEOUT_SECONDS: {settings.backend_timeout}")
logger.info(f"CORS_ALLOWED_ORIGINS: {', '.join(settings.allowed_origins)}")
logger.info(f"DEFAULT_HORA_INICIO: {settings.default_hora_inicio}")

if "localhost" in settings.backend_url:
    logger.warning("⚠️  BACKEND_API_URL points to localhost")

logger.info("=" * 60)

app = FastAPI(
    title="Transmisiones API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    return {"name": "Transmisiones API", "version": __version__, "status": "running"}


@app.get("/health")
def health():
    return {"status": "healthy"}


app.include_router(filiales.router, tags=["Filiales"])
app.include_router(programas.router, tags=["Programas"])
app.include_router(reportes.router, tags=["Reportes"])
app.include_router(transmisiones.router, tags=["Transmisiones"])
