"""
Transmision Service

Loads a branch, its programs and the reports of a date range from the
backend and hands them to the grid builder.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from transmisiones_api.core.agenda import dias_programados, programas_de_filial
from transmisiones_api.core.dias import dia_de_fecha, nombre_dia
from transmisiones_api.core.estados import PRESENTACION
from transmisiones_api.core.fechas import FechaLike, RangoFechas, semana_de
from transmisiones_api.core.grilla import celdas_por_fecha, construir_grilla, resumir_grilla
from transmisiones_api.core.models import Celda, Filial, Programa
from transmisiones_api.core.targets import TARGETS_NO_TRANSMISION, TARGETS_RETRASO, opciones
from transmisiones_api.services.adapter import filial_desde_backend, programa_desde_backend
from transmisiones_api.services.backend_client import BackendClient
from transmisiones_api.services.reporte_service import ReporteService

logger = logging.getLogger(__name__)


class TransmisionService:
    """Service for the transmission status grid."""

    def __init__(self, client: BackendClient):
        self.client = client
        self.reportes = ReporteService(client)

    def _cargar(
        self, filial_id: int, programa_id: Optional[int], solo_activos: bool
    ) -> Tuple[Filial, List[Programa]]:
        filial = filial_desde_backend(self.client.obtener_filial(filial_id))
        programas = [programa_desde_backend(p) for p in self.client.listar_programas()]
        if solo_activos:
            programas = [p for p in programas if p.activo]
        if programa_id is not None:
            programas = [p for p in programas if p.id == int(programa_id)]
        return filial, programas

    def _grilla(
        self, filial: Filial, programas: List[Programa], rango: RangoFechas
    ) -> List[Celda]:
        reportes = self.reportes.obtener_reportes(rango)
        celdas = construir_grilla(filial, programas, reportes, rango)
        ambiguas = sum(1 for c in celdas if c.ambiguo)
        if ambiguas:
            logger.warning(f"Grilla filial={filial.id} {rango.inicio}..{rango.fin}: {ambiguas} celdas con reportes duplicados")
        return celdas

    def obtener_grilla(
        self,
        filial_id: int,
        rango: RangoFechas,
        programa_id: Optional[int] = None,
        solo_activos: bool = True,
    ) -> List[Celda]:
        filial, programas = self._cargar(filial_id, programa_id, solo_activos)
        return self._grilla(filial, programas, rango)

    def obtener_semana(
        self, filial_id: int, fecha: FechaLike, programa_id: Optional[int] = None
    ) -> Dict[str, Any]:
        rango = semana_de(fecha)
        filial, programas = self._cargar(filial_id, programa_id, solo_activos=True)
        celdas = self._grilla(filial, programas, rango)
        return {
            "filialId": int(filial_id),
            "fechaInicio": rango.inicio.isoformat(),
            "fechaFin": rango.fin.isoformat(),
            "resumen": resumir_grilla(celdas),
            "programas": [
                {
                    "programaId": p.id,
                    "nombre": p.nombre,
                    "horaInicio": p.hora_inicio,
                    "fechas": [f.isoformat() for f in dias_programados(p, rango)],
                }
                for p in programas_de_filial(programas, filial)
            ],
            "dias": [
                {
                    "fecha": f.isoformat(),
                    "dia": nombre_dia(dia_de_fecha(f)),
                    "celdas": [c.to_dict() for c in cs],
                }
                for f, cs in celdas_por_fecha(celdas).items()
            ],
        }


def catalogo_estados() -> Dict[str, Any]:
    return {
        "estados": [
            {"estado": estado.value, **presentacion}
            for estado, presentacion in PRESENTACION.items()
        ],
        "targets": {
            "no": opciones(TARGETS_NO_TRANSMISION),
            "tarde": opciones(TARGETS_RETRASO),
        },
    }
