"""Filial Service - branch CRUD over the transmissions backend."""

import logging
from typing import List, Optional

from transmisiones_api.core.agenda import programas_de_filial
from transmisiones_api.core.models import Filial, Programa
from transmisiones_api.exceptions import ValidacionError
from transmisiones_api.services.adapter import (
    filial_a_backend,
    filial_desde_backend,
    programa_desde_backend,
)
from transmisiones_api.services.backend_client import BackendClient

logger = logging.getLogger(__name__)


class FilialService:
    """Service for managing branches (filiales)."""

    def __init__(self, client: BackendClient):
        self.client = client

    def obtener_filiales(self, solo_activas: bool = False) -> List[Filial]:
        filiales = [filial_desde_backend(f) for f in self.client.listar_filiales()]
        if solo_activas:
            filiales = [f for f in filiales if f.activa]
        return sorted(filiales, key=lambda f: f.id)

    def obtener_filial(self, filial_id: int) -> Filial:
        return filial_desde_backend(self.client.obtener_filial(filial_id))

    def obtener_programas(self, filial_id: int) -> List[Programa]:
        filial = self.obtener_filial(filial_id)
        programas = [programa_desde_backend(p) for p in self.client.listar_programas()]
        return programas_de_filial(programas, filial)

    def _validar(self, nombre: Optional[str]) -> str:
        nombre = str(nombre or "").strip()
        if not nombre:
            raise ValidacionError(["nombre_requerido"])
        return nombre

    def crear_filial(self, nombre: str, activa: bool = True) -> Filial:
        nombre = self._validar(nombre)
        data = self.client.crear_filial(filial_a_backend(nombre, activa))
        filial = filial_desde_backend(data)
        logger.info(f"Filial creada: id={filial.id} nombre={filial.nombre!r}")
        return filial

    def actualizar_filial(self, filial_id: int, nombre: str, activa: bool = True) -> Filial:
        nombre = self._validar(nombre)
        payload = filial_a_backend(nombre, activa)
        data = self.client.actualizar_filial(filial_id, payload)
        # Algunos despliegues del backend responden sin cuerpo
        return filial_desde_backend({"id": filial_id, **payload, **data})

    def eliminar_filial(self, filial_id: int) -> None:
        self.client.eliminar_filial(filial_id)
        logger.info(f"Filial eliminada: id={filial_id}")
