"""
Tests para la resolución de reportes por celda
"""

from datetime import date

import pytest

from transmisiones_api.core.estados import EstadoTransmision
from transmisiones_api.core.models import Reporte
from transmisiones_api.core.resolver import PENDIENTE, buscar_reporte, resolver_reporte

pytestmark = pytest.mark.unit

FECHA = date(2024, 1, 3)


def _reporte(id, **kwargs):
    datos = dict(filial_id=1, programa_id=10, fecha=FECHA, estado=EstadoTransmision.SI)
    datos.update(kwargs)
    return Reporte(id=id, **datos)


def test_sin_reporte_es_pendiente():
    assert buscar_reporte([], 1, 10, FECHA) is PENDIENTE
    assert not PENDIENTE
    res = resolver_reporte([], 1, 10, FECHA)
    assert res.pendiente
    assert not res.ambiguo


def test_coincidencia_exacta_de_clave():
    reportes = [
        _reporte(1, programa_id=11),
        _reporte(2, filial_id=2),
        _reporte(3, fecha=date(2024, 1, 4)),
        _reporte(4),
    ]
    assert buscar_reporte(reportes, 1, 10, "2024-01-03").id == 4


def test_duplicados_gana_el_mas_reciente(caplog):
    viejo = _reporte(7, updated_at="2024-01-03T09:00:00")
    nuevo = _reporte(5, updated_at="2024-01-03T18:00:00", estado=EstadoTransmision.TARDE)
    res = resolver_reporte([viejo, nuevo], 1, 10, FECHA)
    assert res.reporte is nuevo
    assert res.ambiguo
    assert len(res.candidatos) == 2
    assert "duplicados" in caplog.text


def test_duplicados_sin_fechas_desempata_por_id():
    a = _reporte(3)
    b = _reporte(9)
    assert resolver_reporte([b, a], 1, 10, FECHA).reporte is b


def test_desempate_no_falla_con_marcas_sin_normalizar():
    con_marca = _reporte(1, updated_at=1704272400000)
    sin_marca = _reporte(2, updated_at=None, created_at="2024-01-02T08:00:00")
    res = resolver_reporte([sin_marca, con_marca], 1, 10, FECHA)
    assert res.reporte is con_marca
    assert res.ambiguo
