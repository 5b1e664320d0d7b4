"""
Resolución de reportes

Busca el reporte de una celda (filial, programa, fecha). La ausencia de
reporte es el estado normal "pendiente", no un error.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from transmisiones_api.core.fechas import FechaLike, parse_fecha
from transmisiones_api.core.models import Reporte

logger = logging.getLogger(__name__)


class _Pendiente:
    """Marcador de "todavía no hay reporte"."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "PENDIENTE"


PENDIENTE = _Pendiente()


@dataclass(frozen=True)
class Resolucion:
    reporte: Optional[Reporte]
    candidatos: Tuple[Reporte, ...] = tuple()

    @property
    def pendiente(self) -> bool:
        return self.reporte is None

    @property
    def ambiguo(self) -> bool:
        return len(self.candidatos) > 1


def _orden_reciente(r: Reporte):
    # El adaptador deja las marcas en ISO-8601, que ordena bien como texto;
    # los None quedan al principio
    return (
        str(r.updated_at or ""),
        str(r.created_at or ""),
        r.id if r.id is not None else -1,
    )


def resolver_reporte(
    reportes: Iterable[Reporte], filial_id: int, programa_id: int, fecha: FechaLike
) -> Resolucion:
    clave = (int(filial_id), int(programa_id), parse_fecha(fecha))
    candidatos = tuple(r for r in reportes if r.clave == clave)
    if not candidatos:
        return Resolucion(reporte=None)
    if len(candidatos) == 1:
        return Resolucion(reporte=candidatos[0], candidatos=candidatos)

    elegido = max(candidatos, key=_orden_reciente)
    ids = [r.id for r in candidatos]
    logger.warning(
        f"Reportes duplicados para filial={clave[0]} programa={clave[1]} "
        f"fecha={clave[2].isoformat()}: ids={ids}, se usa id={elegido.id}"
    )
    return Resolucion(reporte=elegido, candidatos=candidatos)


def buscar_reporte(
    reportes: Iterable[Reporte], filial_id: int, programa_id: int, fecha: FechaLike
) -> Union[Reporte, _Pendiente]:
    res = resolver_reporte(reportes, filial_id, programa_id, fecha)
    if res.reporte is None:
        return PENDIENTE
    return res.reporte
