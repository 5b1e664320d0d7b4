import logging
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from transmisiones_api.core.fechas import FechaInvalidaError, RangoFechas, parse_fecha
from transmisiones_api.exceptions import (
    BackendError,
    NotFoundError,
    TransicionInvalidaError,
    TransmisionesError,
    ValidacionError,
)

logger = logging.getLogger(__name__)


def error_json(error: str, status_code: int, detail: Any = None) -> JSONResponse:
    body: Dict[str, Any] = {"ok": False, "error": error}
    if detail is not None:
        body["detail"] = detail
    return JSONResponse(body, status_code=status_code)


def error_response(exc: Exception, endpoint: str = "") -> JSONResponse:
    """Traduce las excepciones del servicio a la respuesta JSON estándar."""
    if isinstance(exc, ValidacionError):
        return error_json(exc.code, exc.status_code, exc.errores)
    if isinstance(exc, TransicionInvalidaError):
        return error_json(exc.code, exc.status_code, str(exc))
    if isinstance(exc, NotFoundError):
        return error_json(exc.code, exc.status_code)
    if isinstance(exc, BackendError):
        logger.error(f"Backend error on {endpoint}: {exc}")
        return error_json(exc.code, exc.status_code, str(exc))
    if isinstance(exc, FechaInvalidaError):
        return error_json("fecha_invalida", 400, str(exc))
    if isinstance(exc, TransmisionesError):
        return error_json(exc.code, exc.status_code, str(exc))
    logger.exception(f"Unexpected error on {endpoint}")
    return error_json("server_error", 500)


def parse_rango(fecha_inicio: Optional[str], fecha_fin: Optional[str]) -> RangoFechas:
    if not fecha_inicio:
        raise FechaInvalidaError(fecha_inicio)
    inicio = parse_fecha(fecha_inicio)
    fin = parse_fecha(fecha_fin) if fecha_fin else inicio
    return RangoFechas(inicio, fin)
