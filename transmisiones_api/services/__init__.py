# Transmisiones API Services Package
from transmisiones_api.services.backend_client import BackendClient
from transmisiones_api.services.filial_service import FilialService
from transmisiones_api.services.programa_service import ProgramaService
from transmisiones_api.services.reporte_service import ReporteService
from transmisiones_api.services.transmision_service import TransmisionService

__all__ = [
    "BackendClient",
    "FilialService",
    "ProgramaService",
    "ReporteService",
    "TransmisionService",
]
