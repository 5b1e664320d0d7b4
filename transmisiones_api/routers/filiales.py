import logging

from fastapi import APIRouter, Depends

from transmisiones_api.dependencies import get_filial_service
from transmisiones_api.models.schemas import FilialInput
from transmisiones_api.services.filial_service import FilialService
from transmisiones_api.utils import error_response

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/api/filiales")
def api_list_filiales(activas: bool = False, svc: FilialService = Depends(get_filial_service)):
    try:
        items = svc.obtener_filiales(solo_activas=activas)
        return {"ok": True, "items": [f.to_dict() for f in items]}
    except Exception as e:
        return error_response(e, "GET /api/filiales")


@router.get("/api/filiales/{filial_id}")
def api_get_filial(filial_id: int, svc: FilialService = Depends(get_filial_service)):
    try:
        return {"ok": True, "filial": svc.obtener_filial(filial_id).to_dict()}
    except Exception as e:
        return error_response(e, f"GET /api/filiales/{filial_id}")


@router.get("/api/filiales/{filial_id}/programas")
def api_get_filial_programas(filial_id: int, svc: FilialService = Depends(get_filial_service)):
    try:
        items = svc.obtener_programas(filial_id)
        return {"ok": True, "items": [p.to_dict() for p in items]}
    except Exception as e:
        return error_response(e, f"GET /api/filiales/{filial_id}/programas")


@router.post("/api/filiales", status_code=201)
def api_create_filial(payload: FilialInput, svc: FilialService = Depends(get_filial_service)):
    try:
        filial = svc.crear_filial(payload.nombre, payload.activa)
        return {"ok": True, "filial": filial.to_dict()}
    except Exception as e:
        return error_response(e, "POST /api/filiales")


@router.put("/api/filiales/{filial_id}")
def api_update_filial(
    filial_id: int, payload: FilialInput, svc: FilialService = Depends(get_filial_service)
):
    try:
        filial = svc.actualizar_filial(filial_id, payload.nombre, payload.activa)
        return {"ok": True, "filial": filial.to_dict()}
    except Exception as e:
        return error_response(e, f"PUT /api/filiales/{filial_id}")


@router.delete("/api/filiales/{filial_id}")
def api_delete_filial(filial_id: int, svc: FilialService = Depends(get_filial_service)):
    try:
        svc.eliminar_filial(filial_id)
        return {"ok": True}
    except Exception as e:
        return error_response(e, f"DELETE /api/filiales/{filial_id}")
