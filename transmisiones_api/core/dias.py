"""
Días de la semana

Normaliza cualquier variante de un día en español (mayúsculas, minúsculas,
con o sin tildes) a un token canónico sin tildes.
"""

import logging
import unicodedata
from datetime import date, datetime
from typing import Iterable, Optional, Tuple, Union

logger = logging.getLogger(__name__)

LUNES = "LUNES"
MARTES = "MARTES"
MIERCOLES = "MIERCOLES"
JUEVES = "JUEVES"
VIERNES = "VIERNES"
SABADO = "SABADO"
DOMINGO = "DOMINGO"

# Orden de date.weekday(): 0 = lunes ... 6 = domingo
DIAS_CANONICOS: Tuple[str, ...] = (
    LUNES,
    MARTES,
    MIERCOLES,
    JUEVES,
    VIERNES,
    SABADO,
    DOMINGO,
)

NOMBRES_DIAS = {
    LUNES: "Lunes",
    MARTES: "Martes",
    MIERCOLES: "Miércoles",
    JUEVES: "Jueves",
    VIERNES: "Viernes",
    SABADO: "Sábado",
    DOMINGO: "Domingo",
}

DIAS_HABILES: Tuple[str, ...] = (LUNES, MARTES, MIERCOLES, JUEVES, VIERNES)


class DiaInvalidoError(ValueError):
    def __init__(self, valor):
        super().__init__(f"Día de la semana inválido: {valor!r}")
        self.valor = valor


def _sin_tildes(texto: str) -> str:
    decomposed = unicodedata.normalize("NFKD", texto)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def _token(dia: str) -> Optional[str]:
    t = _sin_tildes(dia).strip().upper()
    return t if t in DIAS_CANONICOS else None


def normalizar_dia(dia):
    """Devuelve el token canónico de ``dia`` o ``dia`` sin cambios si no se reconoce."""
    token = _token(dia) if isinstance(dia, str) else None
    if token is None:
        return dia
    return token


def es_dia_valido(dia) -> bool:
    return isinstance(dia, str) and _token(dia) is not None


def parse_dia(dia) -> str:
    if not isinstance(dia, str):
        raise DiaInvalidoError(dia)
    token = _token(dia)
    if token is None:
        raise DiaInvalidoError(dia)
    return token


def normalizar_dias(valor: Union[None, str, Iterable[str]]) -> Tuple[str, ...]:
    """
    Acepta el formato del backend para ``diasSemana``: ``None``, un string
    ("LUNES") o una lista (["LUNES", "MIÉRCOLES"]).

    Los días no reconocidos se conservan tal cual (y se loguean); los
    repetidos se descartan manteniendo el orden.
    """
    if not valor:
        return tuple()
    if isinstance(valor, str):
        valor = [valor]
    out = []
    for d in valor:
        n = normalizar_dia(d)
        if not es_dia_valido(n):
            logger.warning(f"Día de la semana no reconocido: {d!r}")
        if n not in out:
            out.append(n)
    return tuple(out)


def dia_de_fecha(fecha: Union[date, datetime]) -> str:
    # datetime es subclase de date; weekday() es igual en ambos
    return normalizar_dia(NOMBRES_DIAS[DIAS_CANONICOS[fecha.weekday()]])


def nombre_dia(token: str) -> str:
    return NOMBRES_DIAS.get(normalizar_dia(token), token)
