"""
Reporte Service

Reads reports by date range and saves the report of one cell
(filial, programa, fecha). Submissions are validated against the program
schedule and the status-dependent field rules before reaching the backend.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

from transmisiones_api.core.agenda import esta_programado, programa_de_filial
from transmisiones_api.core.estados import EstadoTransmision
from transmisiones_api.core.fechas import FechaLike, RangoFechas, parse_fecha
from transmisiones_api.core.horas import HoraInvalidaError, hora_a_texto, texto_a_hora
from transmisiones_api.core.models import Filial, Programa, Reporte
from transmisiones_api.core.resolver import Resolucion, resolver_reporte
from transmisiones_api.core.targets import (
    a_frontend,
    motivo_efectivo,
    requiere_motivo,
    targets_para_estado,
)
from transmisiones_api.exceptions import TransicionInvalidaError, ValidacionError
from transmisiones_api.services.adapter import (
    filial_desde_backend,
    programa_desde_backend,
    reporte_a_backend,
    reporte_desde_backend,
    reportes_desde_backend,
)
from transmisiones_api.services.backend_client import BackendClient

logger = logging.getLogger(__name__)


def _hora(valor: Optional[str], campo: str, errores: List[str]) -> Optional[str]:
    if not valor:
        return None
    try:
        return hora_a_texto(texto_a_hora(valor, strict=True))
    except HoraInvalidaError:
        errores.append(f"{campo}_invalida")
        return None


def preparar_reporte(
    filial: Filial,
    programa: Programa,
    fecha: FechaLike,
    datos: Dict[str, Any],
) -> Reporte:
    """
    Valida los datos de un formulario y arma el ``Reporte`` con sólo los
    campos que corresponden a su estado.

    Lanza ``TransicionInvalidaError`` si el programa no transmite ese día (o
    no pertenece a la filial) y ``ValidacionError`` si faltan campos.
    """
    f = parse_fecha(fecha)
    if not programa_de_filial(programa, filial):
        raise TransicionInvalidaError(
            f"El programa {programa.id} no pertenece a la filial {filial.id}",
            code="programa_no_asociado",
        )
    if not esta_programado(programa, f):
        raise TransicionInvalidaError(
            f"El programa {programa.id} no transmite el {f.isoformat()}",
            code="dia_no_programado",
        )

    raw = datos.get("estado") or EstadoTransmision.PENDIENTE
    valor_estado = str(getattr(raw, "value", raw)).strip().lower()
    try:
        estado = EstadoTransmision(valor_estado)
    except ValueError:
        raise ValidacionError(["estado_invalido"])
    errores: List[str] = []
    campos: Dict[str, Any] = {}

    if estado is EstadoTransmision.SI:
        hora_real = _hora(datos.get("horaReal") or datos.get("hora"), "hora_real", errores)
        campos["hora_real"] = hora_real or programa.hora_inicio or None
    elif estado in (EstadoTransmision.NO, EstadoTransmision.TARDE):
        target = a_frontend(datos.get("target"))
        if not target:
            errores.append("target_requerido")
        elif target not in targets_para_estado(estado):
            errores.append("target_invalido")
        motivo = motivo_efectivo(target, datos.get("motivo"))
        if requiere_motivo(target) and not motivo:
            errores.append("motivo_requerido")
        campos["target"] = target
        campos["motivo"] = motivo
        if estado is EstadoTransmision.TARDE:
            hora_real = _hora(datos.get("horaReal"), "hora_real", errores)
            if not hora_real and "hora_real_invalida" not in errores:
                errores.append("hora_real_requerida")
            hora_prog = _hora(datos.get("horaProgramada"), "hora_programada", errores)
            campos["hora_real"] = hora_real
            campos["hora_programada"] = hora_prog or programa.hora_inicio or None

    if errores:
        raise ValidacionError(errores)

    rid = datos.get("id_reporte") or datos.get("id")
    try:
        rid = int(rid) if rid is not None else None
    except (TypeError, ValueError):
        raise ValidacionError(["id_reporte_invalido"])

    return Reporte(
        id=rid,
        filial_id=filial.id,
        programa_id=programa.id,
        fecha=f,
        estado=estado,
        observaciones=(datos.get("observaciones") or None),
        **campos,
    )


class ReporteService:
    """Service for transmission reports."""

    def __init__(self, client: BackendClient):
        self.client = client

    def obtener_reportes(self, rango: Optional[RangoFechas] = None) -> List[Reporte]:
        if rango is None:
            items = self.client.listar_reportes()
        else:
            items = self.client.reportes_por_rango(
                rango.inicio.isoformat(), rango.fin.isoformat()
            )
        reportes = reportes_desde_backend(items)
        if rango is not None:
            # El backend no siempre respeta el rango pedido
            reportes = [r for r in reportes if r.fecha in rango]
        return reportes

    def resolver(self, filial_id: int, programa_id: int, fecha: FechaLike) -> Resolucion:
        f = parse_fecha(fecha)
        reportes = self.obtener_reportes(RangoFechas(f, f))
        return resolver_reporte(reportes, filial_id, programa_id, f)

    def guardar_reporte(
        self, filial_id: int, programa_id: int, fecha: FechaLike, datos: Dict[str, Any]
    ) -> Reporte:
        filial = filial_desde_backend(self.client.obtener_filial(filial_id))
        programa = programa_desde_backend(self.client.obtener_programa(programa_id))
        reporte = preparar_reporte(filial, programa, fecha, datos)

        if reporte.id is None:
            # Si ya hay un reporte para la celda se actualiza en lugar de duplicarlo
            existente = self.resolver(filial.id, programa.id, reporte.fecha).reporte
            if existente is not None and existente.id is not None:
                reporte = replace(reporte, id=existente.id)

        payload = reporte_a_backend(reporte)
        if reporte.id is not None:
            data = self.client.actualizar_reporte(reporte.id, payload)
            accion = "actualizado"
        else:
            data = self.client.crear_reporte(payload)
            accion = "creado"

        respuesta = data if isinstance(data, dict) else {}
        guardado = reporte_desde_backend({**payload, **respuesta}) or reporte
        logger.info(
            f"Reporte {accion}: id={guardado.id} filial={filial.id} programa={programa.id} "
            f"fecha={reporte.fecha.isoformat()} estado={reporte.estado.value}"
        )
        return guardado
