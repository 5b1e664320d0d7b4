"""
Backend Adapter

Translates between the backend's JSON shapes and the domain records:

* ``diasSemana`` may be a string or a list, with or without accents.
* ``horaInicio``/``hora``/``hora_tt`` may be ``{hour, minute, second, nano}``
  or a plain string.
* Report targets are full Spanish words on the backend, abbreviations here.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from transmisiones_api.core.dias import normalizar_dias
from transmisiones_api.core.estados import EstadoTransmision
from transmisiones_api.core.fechas import fecha_a_iso, parse_fecha
from transmisiones_api.core.horas import hora_a_texto, texto_a_hora
from transmisiones_api.core.models import Filial, Programa, Reporte
from transmisiones_api.core.targets import (
    OTROS,
    a_backend,
    a_frontend,
    es_target_valido,
    motivo_efectivo,
    target_desde_motivo,
    targets_para_estado,
)

logger = logging.getLogger(__name__)


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _ids(items: Any) -> tuple:
    out: List[int] = []
    for item in items or []:
        raw = item.get("id") if isinstance(item, dict) else item
        try:
            out.append(int(raw))
        except (TypeError, ValueError):
            continue
    return tuple(out)


def _bool(data: Dict[str, Any], *keys: str, default: bool = True) -> bool:
    for k in keys:
        if data.get(k) is not None:
            return bool(data.get(k))
    return default


def _marca_tiempo(value: Any) -> Optional[str]:
    """
    ``createdAt``/``updateAt`` como ISO-8601 UTC sin zona. El backend puede
    mandar texto ISO, epoch (segundos o milisegundos) o el array de Jackson
    ``[año, mes, día, hora, minuto, segundo]``. Lo ilegible es None.
    """
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            segundos = value / 1000 if abs(value) > 1e11 else value
            dt = datetime.fromtimestamp(segundos, tz=timezone.utc)
        elif isinstance(value, (list, tuple)):
            dt = datetime(*[int(x) for x in value[:6]])
        else:
            texto = str(value).strip().replace("Z", "+00:00")
            try:
                dt = datetime.fromisoformat(texto)
            except ValueError:
                # fracciones de nanosegundos que fromisoformat no acepta
                dt = datetime.fromisoformat(texto[:19])
    except (TypeError, ValueError, OverflowError, OSError):
        logger.warning(f"Marca de tiempo ilegible: {value!r}")
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt.isoformat(timespec="seconds")


def _target(data: Dict[str, Any], estado: EstadoTransmision) -> Optional[str]:
    target = a_frontend(data.get("target"))
    if target:
        if not es_target_valido(target):
            logger.warning(f"Reporte {data.get('id')} con target desconocido: {data.get('target')!r}")
        return target
    motivo = data.get("motivo")
    if estado not in (EstadoTransmision.NO, EstadoTransmision.TARDE) or not motivo:
        return None
    # Reportes viejos guardaban sólo el motivo libre
    inferido = target_desde_motivo(str(motivo))
    return inferido if inferido in targets_para_estado(estado) else OTROS


# =========================================================================
# Backend -> dominio
# =========================================================================


def filial_desde_backend(data: Dict[str, Any]) -> Filial:
    programa_ids = _ids(data.get("programas")) or _ids(data.get("programaIds"))
    return Filial(
        id=_int(data.get("id")),
        nombre=str(data.get("nombre") or ""),
        activa=_bool(data, "isActivo", "activa"),
        programa_ids=programa_ids,
        created_at=_marca_tiempo(data.get("createdAt")),
        updated_at=_marca_tiempo(data.get("updateAt") or data.get("updatedAt")),
    )


def programa_desde_backend(data: Dict[str, Any]) -> Programa:
    filiales_ids = _ids(data.get("filiales")) or _ids(data.get("filialesIds"))
    return Programa(
        id=_int(data.get("id")),
        nombre=str(data.get("nombre") or ""),
        activo=_bool(data, "isActivo", "activo"),
        hora_inicio=hora_a_texto(data.get("horaInicio")),
        dias_semana=normalizar_dias(data.get("diasSemana")),
        filiales_ids=filiales_ids,
        created_at=_marca_tiempo(data.get("createdAt")),
        updated_at=_marca_tiempo(data.get("updateAt") or data.get("updatedAt")),
    )


def reporte_desde_backend(data: Dict[str, Any]) -> Optional[Reporte]:
    """Devuelve None si el reporte no tiene una fecha utilizable."""
    try:
        fecha = parse_fecha(data.get("fecha"))
    except ValueError:
        logger.warning(f"Reporte {data.get('id')} con fecha inválida: {data.get('fecha')!r}")
        return None

    estado = EstadoTransmision.desde_backend(
        data.get("estadoTransmision") or data.get("estado")
    )
    target = _target(data, estado)
    hora = hora_a_texto(data.get("hora")) or None
    hora_tt = hora_a_texto(data.get("hora_tt")) or None

    # En reportes tardíos ``hora`` es la hora programada y ``hora_tt`` la real
    campos: Dict[str, Any] = {}
    if estado is EstadoTransmision.SI:
        campos = {"hora_real": hora}
    elif estado is EstadoTransmision.NO:
        campos = {"target": target, "motivo": motivo_efectivo(target, data.get("motivo"))}
    elif estado is EstadoTransmision.TARDE:
        campos = {
            "hora_programada": hora,
            "hora_real": hora_tt,
            "target": target,
            "motivo": motivo_efectivo(target, data.get("motivo")),
        }

    rid = data.get("id")
    return Reporte(
        id=_int(rid) if rid is not None else None,
        filial_id=_int(data.get("filialId")),
        programa_id=_int(data.get("programaId")),
        fecha=fecha,
        estado=estado,
        observaciones=data.get("observaciones"),
        created_at=_marca_tiempo(data.get("createdAt")),
        updated_at=_marca_tiempo(data.get("updateAt") or data.get("updatedAt")),
        **campos,
    )


def reportes_desde_backend(items: List[Dict[str, Any]]) -> List[Reporte]:
    out = []
    for item in items or []:
        r = reporte_desde_backend(item)
        if r is not None:
            out.append(r)
    return out


# =========================================================================
# Dominio -> backend
# =========================================================================


def filial_a_backend(nombre: str, activa: bool) -> Dict[str, Any]:
    return {"nombre": nombre, "isActivo": bool(activa)}


def programa_a_backend(
    nombre: str, activo: bool, dias_semana: List[str], hora_inicio: str
) -> Dict[str, Any]:
    return {
        "nombre": nombre,
        "isActivo": bool(activo),
        "diasSemana": list(dias_semana),
        "horaInicio": texto_a_hora(hora_inicio).as_dict(),
    }


def reporte_a_backend(reporte: Reporte) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "fecha": fecha_a_iso(reporte.fecha),
        "estadoTransmision": reporte.estado.backend,
        "filialId": reporte.filial_id,
        "programaId": reporte.programa_id,
    }
    if reporte.estado in (EstadoTransmision.NO, EstadoTransmision.TARDE):
        if reporte.target:
            data["target"] = a_backend(reporte.target)
        motivo = motivo_efectivo(reporte.target, reporte.motivo)
        if motivo:
            data["motivo"] = motivo
    if reporte.estado is EstadoTransmision.TARDE:
        if reporte.hora_programada:
            data["hora"] = texto_a_hora(reporte.hora_programada).as_dict()
        if reporte.hora_real:
            data["hora_tt"] = texto_a_hora(reporte.hora_real).as_dict()
    elif reporte.estado is EstadoTransmision.SI and reporte.hora_real:
        data["hora"] = texto_a_hora(reporte.hora_real).as_dict()
    if reporte.observaciones:
        data["observaciones"] = reporte.observaciones
    if reporte.id is not None:
        data["id"] = reporte.id
    return data
