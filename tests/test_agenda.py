"""
Tests para la agenda de programas
"""

from datetime import date, timedelta

import pytest

from transmisiones_api.core.agenda import (
    dias_programados,
    esta_programado,
    programa_de_filial,
    programas_de_filial,
)
from transmisiones_api.core.fechas import RangoFechas
from transmisiones_api.core.models import Filial, Programa

pytestmark = pytest.mark.unit


def _programa(dias, **kwargs):
    return Programa(id=kwargs.pop("id", 10), nombre="Prog", dias_semana=tuple(dias), **kwargs)


def test_sin_dias_nunca_esta_programado():
    programa = _programa([])
    for f in RangoFechas(date(2024, 1, 1), date(2024, 1, 14)):
        assert not esta_programado(programa, f)


@pytest.mark.slow
def test_lunes_durante_un_anio_bisiesto():
    programa = _programa(["LUNES"])
    d = date(2024, 1, 1)
    while d.year == 2024:
        assert esta_programado(programa, d) == (d.weekday() == 0)
        d += timedelta(days=1)


def test_dias_con_tildes_y_minusculas():
    programa = _programa(["miércoles", "Sábado"])
    assert esta_programado(programa, "2024-01-03")
    assert esta_programado(programa, "06/01/2024")
    assert not esta_programado(programa, date(2024, 1, 4))


def test_dias_programados():
    programa = _programa(["LUNES", "MIERCOLES"])
    fechas = dias_programados(programa, RangoFechas(date(2024, 1, 1), date(2024, 1, 7)))
    assert fechas == [date(2024, 1, 1), date(2024, 1, 3)]


def test_programa_de_filial_por_cualquiera_de_los_lados():
    filial = Filial(id=1, nombre="Centro", programa_ids=(20,))
    assert programa_de_filial(_programa(["LUNES"], filiales_ids=(1, 2)), filial)
    assert programa_de_filial(_programa(["LUNES"], id=20), filial)
    assert not programa_de_filial(_programa(["LUNES"], id=30, filiales_ids=(2,)), filial)


def test_programas_de_filial():
    filial = Filial(id=1, nombre="Centro")
    programas = [
        _programa(["LUNES"], id=10, filiales_ids=(1,)),
        _programa(["LUNES"], id=11, filiales_ids=(2,)),
    ]
    assert [p.id for p in programas_de_filial(programas, filial)] == [10]
