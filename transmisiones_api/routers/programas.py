import logging

from fastapi import APIRouter, Depends

from transmisiones_api.dependencies import get_programa_service
from transmisiones_api.models.schemas import ProgramaInput
from transmisiones_api.services.programa_service import ProgramaService
from transmisiones_api.utils import error_response

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/api/programas")
def api_list_programas(activos: bool = False, svc: ProgramaService = Depends(get_programa_service)):
    try:
        items = svc.obtener_programas(solo_activos=activos)
        return {"ok": True, "items": [p.to_dict() for p in items]}
    except Exception as e:
        return error_response(e, "GET /api/programas")


@router.get("/api/programas/{programa_id}")
def api_get_programa(programa_id: int, svc: ProgramaService = Depends(get_programa_service)):
    try:
        return {"ok": True, "programa": svc.obtener_programa(programa_id).to_dict()}
    except Exception as e:
        return error_response(e, f"GET /api/programas/{programa_id}")


@router.post("/api/programas", status_code=201)
def api_create_programa(payload: ProgramaInput, svc: ProgramaService = Depends(get_programa_service)):
    try:
        programa = svc.crear_programa(
            payload.nombre,
            payload.diasSemana,
            hora_inicio=payload.horaInicio,
            activo=payload.activo,
            filial_ids=payload.filialIds,
        )
        return {"ok": True, "programa": programa.to_dict()}
    except Exception as e:
        return error_response(e, "POST /api/programas")


@router.put("/api/programas/{programa_id}")
def api_update_programa(
    programa_id: int, payload: ProgramaInput, svc: ProgramaService = Depends(get_programa_service)
):
    try:
        programa = svc.actualizar_programa(
            programa_id,
            payload.nombre,
            payload.diasSemana,
            hora_inicio=payload.horaInicio,
            activo=payload.activo,
            filial_ids=payload.filialIds,
        )
        return {"ok": True, "programa": programa.to_dict()}
    except Exception as e:
        return error_response(e, f"PUT /api/programas/{programa_id}")


@router.delete("/api/programas/{programa_id}")
def api_delete_programa(programa_id: int, svc: ProgramaService = Depends(get_programa_service)):
    try:
        svc.eliminar_programa(programa_id)
        return {"ok": True}
    except Exception as e:
        return error_response(e, f"DELETE /api/programas/{programa_id}")
