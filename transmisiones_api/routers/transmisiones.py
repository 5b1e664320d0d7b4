"""
Transmisiones Router - status grid per branch and date range
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from transmisiones_api.core.grilla import resumir_grilla
from transmisiones_api.dependencies import get_transmision_service
from transmisiones_api.services.transmision_service import TransmisionService, catalogo_estados
from transmisiones_api.utils import error_response, parse_rango

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/transmisiones/grilla")
def api_grilla(
    filialId: int,
    fechaInicio: str,
    fechaFin: Optional[str] = None,
    programaId: Optional[int] = None,
    svc: TransmisionService = Depends(get_transmision_service),
):
    """Una celda por (programa, fecha) del rango para la filial."""
    try:
        rango = parse_rango(fechaInicio, fechaFin)
        celdas = svc.obtener_grilla(filialId, rango, programa_id=programaId)
        return {
            "ok": True,
            "filialId": filialId,
            "fechaInicio": rango.inicio.isoformat(),
            "fechaFin": rango.fin.isoformat(),
            "resumen": resumir_grilla(celdas),
            "items": [c.to_dict() for c in celdas],
        }
    except Exception as e:
        return error_response(e, "GET /api/transmisiones/grilla")


@router.get("/api/transmisiones/semana")
def api_semana(
    filialId: int,
    fecha: str,
    programaId: Optional[int] = None,
    svc: TransmisionService = Depends(get_transmision_service),
):
    """Vista semanal (lunes a domingo) de la semana que contiene ``fecha``."""
    try:
        return {"ok": True, **svc.obtener_semana(filialId, fecha, programa_id=programaId)}
    except Exception as e:
        return error_response(e, "GET /api/transmisiones/semana")


@router.get("/api/transmisiones/estados")
def api_estados():
    return {"ok": True, **catalogo_estados()}
