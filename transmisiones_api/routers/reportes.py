"""
Reportes Router - reports by date range and per-cell create/update
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from transmisiones_api.core.fechas import parse_fecha
from transmisiones_api.dependencies import get_reporte_service
from transmisiones_api.models.schemas import ReporteInput
from transmisiones_api.services.reporte_service import ReporteService
from transmisiones_api.utils import error_response, parse_rango

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/reportes")
def api_list_reportes(
    fechaInicio: Optional[str] = None,
    fechaFin: Optional[str] = None,
    svc: ReporteService = Depends(get_reporte_service),
):
    """List reports, optionally restricted to a date range"""
    try:
        rango = parse_rango(fechaInicio, fechaFin) if (fechaInicio or fechaFin) else None
        items = svc.obtener_reportes(rango)
        return {"ok": True, "items": [r.to_dict() for r in items]}
    except Exception as e:
        return error_response(e, "GET /api/reportes")


@router.get("/api/reportes/{filial_id}/{programa_id}/{fecha}")
def api_get_reporte_celda(
    filial_id: int,
    programa_id: int,
    fecha: str,
    svc: ReporteService = Depends(get_reporte_service),
):
    """Report of one cell; ``pendiente`` when none exists yet"""
    try:
        f = parse_fecha(fecha)
        res = svc.resolver(filial_id, programa_id, f)
        return {
            "ok": True,
            "filialId": filial_id,
            "programaId": programa_id,
            "fecha": f.isoformat(),
            "pendiente": res.pendiente,
            "ambiguo": res.ambiguo,
            "reporte": res.reporte.to_dict() if res.reporte is not None else None,
        }
    except Exception as e:
        return error_response(e, f"GET /api/reportes/{filial_id}/{programa_id}/{fecha}")


@router.post("/api/reportes")
def api_save_reporte(payload: ReporteInput, svc: ReporteService = Depends(get_reporte_service)):
    """Create or update the report of a cell"""
    try:
        reporte = svc.guardar_reporte(
            payload.filialId, payload.programaId, payload.fecha, payload.model_dump()
        )
        return {"ok": True, "reporte": reporte.to_dict()}
    except Exception as e:
        return error_response(e, "POST /api/reportes")
