"""
Estados de transmisión y tabla de presentación.
"""

import logging
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class EstadoTransmision(str, Enum):
    """Estado de un reporte"""
    PENDIENTE = "pendiente"
    SI = "si"
    NO = "no"
    TARDE = "tarde"

    @property
    def backend(self) -> str:
        return _A_BACKEND[self]

    @classmethod
    def desde_backend(cls, valor: Optional[str]) -> "EstadoTransmision":
        """``Si``/``No``/``Tarde``/``Pendiente`` (o en minúsculas); lo desconocido es pendiente."""
        if isinstance(valor, cls):
            return valor
        if not valor:
            return cls.PENDIENTE
        try:
            return cls(str(valor).strip().lower())
        except ValueError:
            logger.warning(f"Estado de transmisión desconocido: {valor!r}")
            return cls.PENDIENTE


_A_BACKEND = {
    EstadoTransmision.PENDIENTE: "Pendiente",
    EstadoTransmision.SI: "Si",
    EstadoTransmision.NO: "No",
    EstadoTransmision.TARDE: "Tarde",
}


class EstadoCelda(str, Enum):
    """Estado de una celda de la grilla"""
    NO_PROGRAMADO = "no_programado"
    PENDIENTE = "pendiente"
    SI = "si"
    NO = "no"
    TARDE = "tarde"

    @classmethod
    def desde_reporte(cls, estado: EstadoTransmision) -> "EstadoCelda":
        return cls(estado.value)


PRESENTACION: Dict[EstadoCelda, Dict[str, str]] = {
    EstadoCelda.NO_PROGRAMADO: {
        "etiqueta": "No programado",
        "color": "gray-100",
        "icono": "minus",
    },
    EstadoCelda.PENDIENTE: {
        "etiqueta": "Pendiente",
        "color": "gray-200",
        "icono": "clock",
    },
    EstadoCelda.SI: {
        "etiqueta": "Transmitió",
        "color": "emerald-500",
        "icono": "check",
    },
    EstadoCelda.NO: {
        "etiqueta": "No transmitió",
        "color": "red-500",
        "icono": "x",
    },
    EstadoCelda.TARDE: {
        "etiqueta": "Transmitió tarde",
        "color": "amber-500",
        "icono": "alert",
    },
}
