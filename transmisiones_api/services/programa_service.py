"""Programa Service - program CRUD over the transmissions backend."""

import logging
from typing import Iterable, List, Optional, Tuple

from transmisiones_api.config import get_settings
from transmisiones_api.core.dias import DiaInvalidoError, parse_dia
from transmisiones_api.core.horas import HoraInvalidaError, hora_a_texto, texto_a_hora
from transmisiones_api.core.models import Programa
from transmisiones_api.exceptions import ValidacionError
from transmisiones_api.services.adapter import programa_a_backend, programa_desde_backend
from transmisiones_api.services.backend_client import BackendClient

logger = logging.getLogger(__name__)


class ProgramaService:
    """Service for managing programs and their weekly schedule."""

    def __init__(self, client: BackendClient):
        self.client = client

    def obtener_programas(self, solo_activos: bool = False) -> List[Programa]:
        programas = [programa_desde_backend(p) for p in self.client.listar_programas()]
        if solo_activos:
            programas = [p for p in programas if p.activo]
        return sorted(programas, key=lambda p: p.id)

    def obtener_programa(self, programa_id: int) -> Programa:
        return programa_desde_backend(self.client.obtener_programa(programa_id))

    def _validar(
        self,
        nombre: Optional[str],
        dias_semana: Optional[Iterable[str]],
        hora_inicio: Optional[str],
    ) -> Tuple[str, List[str], str]:
        errores: List[str] = []

        nombre = str(nombre or "").strip()
        if not nombre:
            errores.append("nombre_requerido")

        dias: List[str] = []
        for d in dias_semana or []:
            try:
                token = parse_dia(d)
            except DiaInvalidoError:
                errores.append("dias_invalidos")
                break
            if token not in dias:
                dias.append(token)
        if not dias and "dias_invalidos" not in errores:
            errores.append("dias_requeridos")

        hora = (hora_inicio or "").strip() or get_settings().default_hora_inicio
        try:
            hora = hora_a_texto(texto_a_hora(hora, strict=True))
        except HoraInvalidaError:
            errores.append("hora_invalida")

        if errores:
            raise ValidacionError(errores)
        return nombre, dias, hora

    def _asignar_filiales(self, programa_id: int, filial_ids: Optional[List[int]]) -> Tuple[int, ...]:
        if not filial_ids:
            return tuple()
        ids = tuple(int(x) for x in filial_ids)
        self.client.asignar_filiales(programa_id, list(ids))
        return ids

    def crear_programa(
        self,
        nombre: str,
        dias_semana: Iterable[str],
        hora_inicio: Optional[str] = None,
        activo: bool = True,
        filial_ids: Optional[List[int]] = None,
    ) -> Programa:
        nombre, dias, hora = self._validar(nombre, dias_semana, hora_inicio)
        data = self.client.crear_programa(programa_a_backend(nombre, activo, dias, hora))
        programa = programa_desde_backend(data)
        if programa.id and filial_ids:
            try:
                ids = self._asignar_filiales(programa.id, filial_ids)
                programa = programa_desde_backend({**data, "filialesIds": list(ids), "filiales": None})
            except Exception as e:
                # El programa ya quedó creado; la asociación se puede reintentar con PUT
                logger.error(f"Error al asociar filiales al programa {programa.id}: {e}")
        logger.info(f"Programa creado: id={programa.id} nombre={programa.nombre!r} dias={dias}")
        return programa

    def actualizar_programa(
        self,
        programa_id: int,
        nombre: str,
        dias_semana: Iterable[str],
        hora_inicio: Optional[str] = None,
        activo: bool = True,
        filial_ids: Optional[List[int]] = None,
    ) -> Programa:
        nombre, dias, hora = self._validar(nombre, dias_semana, hora_inicio)
        payload = programa_a_backend(nombre, activo, dias, hora)
        data = self.client.actualizar_programa(programa_id, payload)
        merged = {"id": programa_id, **payload, **data}
        if filial_ids:
            ids = self._asignar_filiales(programa_id, filial_ids)
            merged = {**merged, "filialesIds": list(ids), "filiales": None}
        return programa_desde_backend(merged)

    def eliminar_programa(self, programa_id: int) -> None:
        self.client.eliminar_programa(programa_id)
        logger.info(f"Programa eliminado: id={programa_id}")
