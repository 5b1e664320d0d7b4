"""
Transmisiones API Dependencies
FastAPI dependency injection for the backend client and services
"""

import logging
from typing import Generator

from fastapi import Depends

from transmisiones_api.services.backend_client import BackendClient
from transmisiones_api.services.filial_service import FilialService
from transmisiones_api.services.programa_service import ProgramaService
from transmisiones_api.services.reporte_service import ReporteService
from transmisiones_api.services.transmision_service import TransmisionService

logger = logging.getLogger(__name__)


def get_backend_client() -> Generator[BackendClient, None, None]:
    """Un cliente (y una sesión HTTP) por request."""
    client = BackendClient()
    try:
        yield client
    finally:
        try:
            client.session.close()
        except Exception as e:
            logger.debug(f"Error closing backend session: {e}")


def get_filial_service(client: BackendClient = Depends(get_backend_client)) -> FilialService:
    return FilialService(client)


def get_programa_service(client: BackendClient = Depends(get_backend_client)) -> ProgramaService:
    return ProgramaService(client)


def get_reporte_service(client: BackendClient = Depends(get_backend_client)) -> ReporteService:
    return ReporteService(client)


def get_transmision_service(
    client: BackendClient = Depends(get_backend_client),
) -> TransmisionService:
    return TransmisionService(client)
