"""
Codec de horas

El backend representa las horas como ``{hour, minute, second, nano}`` o
como texto ``"HH:MM"``; internamente se usa siempre ``"HH:MM"``.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

_HH_MM = re.compile(r"^(\d{1,2}):(\d{1,2})(?::(\d{1,2})(?:\.\d+)?)?$")


class HoraInvalidaError(ValueError):
    def __init__(self, valor):
        super().__init__(f"Hora inválida: {valor!r}")
        self.valor = valor


@dataclass(frozen=True)
class HoraBackend:
    hour: int = 0
    minute: int = 0
    second: int = 0
    nano: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
            "nano": self.nano,
        }


MEDIANOCHE = HoraBackend()


def _en_rango(hour: int, minute: int) -> bool:
    return 0 <= hour <= 23 and 0 <= minute <= 59


def _formatear(hour: int, minute: int) -> str:
    return f"{int(hour):02d}:{int(minute):02d}"


def hora_a_texto(valor: Union[None, str, HoraBackend, Mapping[str, Any]]) -> str:
    """
    Convierte una hora del backend a ``"HH:MM"``.

    Un texto ya canónico se devuelve tal cual; ``"HH:MM:SS"`` se recorta a
    ``"HH:MM"``. Cualquier otro texto (incluido ``"25:00"``) pasa sin cambios.
    Un registro fuera de rango da ``""``.
    """
    if not valor:
        return ""
    if isinstance(valor, HoraBackend):
        return _formatear(valor.hour, valor.minute)
    if isinstance(valor, str):
        m = _HH_MM.match(valor.strip())
        if not m or not _en_rango(int(m.group(1)), int(m.group(2))):
            return valor
        return _formatear(m.group(1), m.group(2))
    if isinstance(valor, Mapping):
        try:
            hour, minute = int(valor.get("hour") or 0), int(valor.get("minute") or 0)
        except (TypeError, ValueError):
            return ""
        return _formatear(hour, minute) if _en_rango(hour, minute) else ""
    raise TypeError(f"Formato de hora no soportado: {type(valor).__name__}")


def texto_a_hora(texto, strict: bool = False) -> HoraBackend:
    """
    Convierte ``"HH:MM"`` al registro del backend.

    En modo laxo (el comportamiento histórico) un texto vacío, mal formado o
    fuera de rango se decodifica como medianoche. Con ``strict=True`` se
    lanza ``HoraInvalidaError``.
    """
    if not texto:
        if strict:
            raise HoraInvalidaError(texto)
        return MEDIANOCHE
    if isinstance(texto, HoraBackend):
        return texto

    m = _HH_MM.match(str(texto).strip())
    hour, minute = (int(m.group(1)), int(m.group(2))) if m else (-1, -1)
    if not _en_rango(hour, minute):
        if strict:
            raise HoraInvalidaError(texto)
        return MEDIANOCHE
    return HoraBackend(hour=hour, minute=minute)
