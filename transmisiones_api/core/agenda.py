"""
Agenda de programas

Decide si un programa transmite en una fecha dada. La comparación se hace
siempre entre tokens normalizados: los días guardados en el programa y el
día derivado de la fecha pueden venir con o sin tildes.
"""

from typing import Iterable, List

from transmisiones_api.core.dias import dia_de_fecha, normalizar_dia
from transmisiones_api.core.fechas import FechaLike, parse_fecha
from transmisiones_api.core.models import Filial, Programa


def esta_programado(programa: Programa, fecha: FechaLike) -> bool:
    dias = programa.dias_semana
    if not dias:
        return False
    dia = normalizar_dia(dia_de_fecha(parse_fecha(fecha)))
    return any(normalizar_dia(d) == dia for d in dias)


def dias_programados(programa: Programa, fechas: Iterable[FechaLike]) -> List:
    return [parse_fecha(f) for f in fechas if esta_programado(programa, f)]


def programa_de_filial(programa: Programa, filial: Filial) -> bool:
    """
    Un programa puede estar compartido por varias filiales. Se asocia a la
    filial si ésta figura en ``filiales_ids`` o si la filial lo lista en
    ``programa_ids``.
    """
    try:
        fid = int(filial.id)
    except (TypeError, ValueError):
        return False
    if fid in {int(x) for x in programa.filiales_ids}:
        return True
    return int(programa.id) in {int(x) for x in filial.programa_ids}


def programas_de_filial(programas: Iterable[Programa], filial: Filial) -> List[Programa]:
    return [p for p in programas if programa_de_filial(p, filial)]
