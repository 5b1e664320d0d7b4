import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator, List, Union

_ISO = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_DMY = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")

FechaLike = Union[date, datetime, str]


class FechaInvalidaError(ValueError):
    def __init__(self, valor):
        super().__init__(f"Fecha inválida: {valor!r}")
        self.valor = valor


def parse_fecha(valor: FechaLike) -> date:
    """Acepta ``date``, ``datetime``, ``YYYY-MM-DD`` o ``DD/MM/YYYY``."""
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor
    if isinstance(valor, str):
        s = valor.strip()
        # El backend a veces devuelve timestamps completos
        if "T" in s:
            s = s.split("T", 1)[0]
        try:
            m = _ISO.match(s)
            if m:
                return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
            m = _DMY.match(s)
            if m:
                return date(int(m.group(3)), int(m.group(2)), int(m.group(1)))
        except ValueError:
            raise FechaInvalidaError(valor)
    raise FechaInvalidaError(valor)


def fecha_a_iso(valor: FechaLike) -> str:
    return parse_fecha(valor).isoformat()


@dataclass(frozen=True)
class RangoFechas:
    """Rango de fechas inclusivo."""

    inicio: date
    fin: date

    def __post_init__(self):
        if self.fin < self.inicio:
            raise FechaInvalidaError(f"{self.inicio}..{self.fin}")

    @classmethod
    def desde(cls, inicio: FechaLike, fin: FechaLike) -> "RangoFechas":
        return cls(parse_fecha(inicio), parse_fecha(fin))

    def __iter__(self) -> Iterator[date]:
        d = self.inicio
        while d <= self.fin:
            yield d
            d += timedelta(days=1)

    def __len__(self) -> int:
        return (self.fin - self.inicio).days + 1

    def __contains__(self, fecha) -> bool:
        try:
            f = parse_fecha(fecha)
        except FechaInvalidaError:
            return False
        return self.inicio <= f <= self.fin

    def dias(self) -> List[date]:
        return list(self)


def semana_de(fecha: FechaLike) -> RangoFechas:
    """Semana de lunes a domingo que contiene ``fecha``."""
    f = parse_fecha(fecha)
    lunes = f - timedelta(days=f.weekday())
    return RangoFechas(lunes, lunes + timedelta(days=6))


def mes_de(fecha: FechaLike) -> RangoFechas:
    f = parse_fecha(fecha)
    inicio = f.replace(day=1)
    siguiente = (inicio + timedelta(days=32)).replace(day=1)
    return RangoFechas(inicio, siguiente - timedelta(days=1))
