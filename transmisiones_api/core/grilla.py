"""
Grilla de estados

Combina la agenda de cada programa con los reportes existentes para
producir una celda por (filial, programa, fecha). Los días en que el
programa no transmite se marcan como "no programado" sin buscar reporte.
"""

from collections import Counter, OrderedDict
from datetime import date
from typing import Dict, Iterable, List, Sequence

from transmisiones_api.core.agenda import esta_programado, programas_de_filial
from transmisiones_api.core.estados import EstadoCelda, EstadoTransmision
from transmisiones_api.core.fechas import FechaLike, parse_fecha
from transmisiones_api.core.models import Celda, Filial, Programa, Reporte
from transmisiones_api.core.resolver import resolver_reporte
from transmisiones_api.core.targets import motivo_efectivo


def _celda_desde_reporte(
    filial: Filial, programa: Programa, fecha: date, reporte: Reporte, ambiguo: bool
) -> Celda:
    base = dict(
        filial_id=filial.id,
        programa_id=programa.id,
        fecha=fecha,
        reporte_id=reporte.id,
        estado=EstadoCelda.desde_reporte(reporte.estado),
        ambiguo=ambiguo,
    )
    hora_programa = programa.hora_inicio or None
    estado = reporte.estado
    if estado is EstadoTransmision.SI:
        return Celda(
            hora_programada=hora_programa,
            hora_real=reporte.hora_real,
            **base,
        )
    if estado is EstadoTransmision.NO:
        return Celda(
            hora_programada=hora_programa,
            target=reporte.target,
            motivo=motivo_efectivo(reporte.target, reporte.motivo),
            **base,
        )
    if estado is EstadoTransmision.TARDE:
        return Celda(
            hora_programada=reporte.hora_programada or hora_programa,
            hora_real=reporte.hora_real,
            target=reporte.target,
            motivo=motivo_efectivo(reporte.target, reporte.motivo),
            **base,
        )
    # pendiente: los campos dependientes del estado quedan vacíos
    return Celda(hora_programada=hora_programa, **base)


def construir_celda(
    filial: Filial, programa: Programa, fecha: FechaLike, reportes: Sequence[Reporte]
) -> Celda:
    f = parse_fecha(fecha)
    if not esta_programado(programa, f):
        return Celda(
            filial_id=filial.id,
            programa_id=programa.id,
            fecha=f,
            estado=EstadoCelda.NO_PROGRAMADO,
        )
    res = resolver_reporte(reportes, filial.id, programa.id, f)
    if res.reporte is None:
        return Celda(
            filial_id=filial.id,
            programa_id=programa.id,
            fecha=f,
            estado=EstadoCelda.PENDIENTE,
            hora_programada=programa.hora_inicio or None,
        )
    return _celda_desde_reporte(filial, programa, f, res.reporte, res.ambiguo)


def construir_grilla(
    filial: Filial,
    programas: Iterable[Programa],
    reportes: Iterable[Reporte],
    rango: Iterable[FechaLike],
) -> List[Celda]:
    reportes = [r for r in reportes if r.filial_id == filial.id]
    fechas = [parse_fecha(f) for f in rango]
    return [
        construir_celda(filial, programa, f, reportes)
        for programa in programas_de_filial(programas, filial)
        for f in fechas
    ]


def resumir_grilla(celdas: Iterable[Celda]) -> Dict[str, int]:
    conteo = Counter(c.estado for c in celdas)
    return {estado.value: conteo.get(estado, 0) for estado in EstadoCelda}


def celdas_por_fecha(celdas: Iterable[Celda]) -> "OrderedDict[date, List[Celda]]":
    out: "OrderedDict[date, List[Celda]]" = OrderedDict()
    for c in sorted(celdas, key=lambda c: (c.fecha, c.programa_id)):
        out.setdefault(c.fecha, []).append(c)
    return out
