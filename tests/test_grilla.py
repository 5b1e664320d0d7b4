"""
Tests para la grilla de estados
"""

from datetime import date

import pytest

from transmisiones_api.core.dias import DIAS_HABILES
from transmisiones_api.core.estados import EstadoCelda, EstadoTransmision
from transmisiones_api.core.fechas import RangoFechas
from transmisiones_api.core.grilla import (
    celdas_por_fecha,
    construir_celda,
    construir_grilla,
    resumir_grilla,
)
from transmisiones_api.core.models import Filial, Programa, Reporte

pytestmark = pytest.mark.unit

SEMANA = RangoFechas(date(2024, 1, 1), date(2024, 1, 7))


@pytest.fixture
def filial():
    return Filial(id=1, nombre="Centro")


@pytest.fixture
def programa():
    return Programa(
        id=10,
        nombre="Noticiero",
        hora_inicio="08:00",
        dias_semana=("LUNES", "MIERCOLES"),
        filiales_ids=(1,),
    )


def test_semana_sin_reportes(filial, programa):
    celdas = construir_grilla(filial, [programa], [], SEMANA)
    estados = {c.fecha.day: c.estado for c in celdas}
    assert estados == {
        1: EstadoCelda.PENDIENTE,
        2: EstadoCelda.NO_PROGRAMADO,
        3: EstadoCelda.PENDIENTE,
        4: EstadoCelda.NO_PROGRAMADO,
        5: EstadoCelda.NO_PROGRAMADO,
        6: EstadoCelda.NO_PROGRAMADO,
        7: EstadoCelda.NO_PROGRAMADO,
    }
    assert celdas[0].hora_programada == "08:00"
    assert celdas[1].hora_programada is None


def test_programa_de_lunes_a_viernes(filial):
    habiles = Programa(id=11, nombre="Magazine", dias_semana=DIAS_HABILES, filiales_ids=(1,))
    resumen = resumir_grilla(construir_grilla(filial, [habiles], [], SEMANA))
    assert resumen["pendiente"] == 5
    assert resumen["no_programado"] == 2
    assert resumen["si"] == resumen["no"] == resumen["tarde"] == 0


def test_tarde_con_motivo_libre(filial, programa):
    reporte = Reporte(
        id=100,
        filial_id=1,
        programa_id=10,
        fecha=date(2024, 1, 3),
        estado=EstadoTransmision.TARDE,
        hora_real="08:25",
        target="Otros",
        motivo="Corte de luz",
    )
    celda = construir_celda(filial, programa, "2024-01-03", [reporte])
    assert celda.estado is EstadoCelda.TARDE
    assert celda.target == "Otros"
    assert celda.motivo == "Corte de luz"
    assert celda.hora_real == "08:25"
    assert celda.hora_programada == "08:00"
    assert celda.reporte_id == 100


def test_no_transmitio_descarta_motivo_sin_otros(filial, programa):
    reporte = Reporte(
        filial_id=1,
        programa_id=10,
        fecha=date(2024, 1, 1),
        estado=EstadoTransmision.NO,
        target="Fta",
        motivo="texto viejo",
    )
    celda = construir_celda(filial, programa, date(2024, 1, 1), [reporte])
    assert celda.estado is EstadoCelda.NO
    assert celda.target == "Fta"
    assert celda.motivo is None


def test_dia_no_programado_ignora_reportes(filial, programa):
    reporte = Reporte(
        filial_id=1, programa_id=10, fecha=date(2024, 1, 2), estado=EstadoTransmision.SI
    )
    celda = construir_celda(filial, programa, date(2024, 1, 2), [reporte])
    assert celda.estado is EstadoCelda.NO_PROGRAMADO
    assert celda.reporte_id is None
    assert not celda.programado


def test_reportes_de_otra_filial_no_cuentan(filial, programa):
    ajeno = Reporte(
        filial_id=2, programa_id=10, fecha=date(2024, 1, 1), estado=EstadoTransmision.SI
    )
    celdas = construir_grilla(filial, [programa], [ajeno], SEMANA)
    assert celdas[0].estado is EstadoCelda.PENDIENTE


def test_programas_de_otra_filial_se_omiten(filial, programa):
    otro = Programa(id=12, nombre="Otro", dias_semana=("LUNES",), filiales_ids=(2,))
    celdas = construir_grilla(filial, [programa, otro], [], SEMANA)
    assert {c.programa_id for c in celdas} == {10}


def test_celdas_ambiguas(filial, programa):
    reportes = [
        Reporte(id=1, filial_id=1, programa_id=10, fecha=date(2024, 1, 1), estado=EstadoTransmision.NO, target="Enf"),
        Reporte(id=2, filial_id=1, programa_id=10, fecha=date(2024, 1, 1), estado=EstadoTransmision.SI, hora_real="08:02"),
    ]
    celda = construir_celda(filial, programa, date(2024, 1, 1), reportes)
    assert celda.ambiguo
    assert celda.estado is EstadoCelda.SI
    assert celda.to_dict()["ambiguo"] is True


def test_celdas_por_fecha(filial, programa):
    agrupadas = celdas_por_fecha(construir_grilla(filial, [programa], [], SEMANA))
    assert list(agrupadas) == SEMANA.dias()
    assert all(len(cs) == 1 for cs in agrupadas.values())


def test_celda_to_dict(filial, programa):
    data = construir_celda(filial, programa, date(2024, 1, 1), []).to_dict()
    assert data["fecha"] == "2024-01-01"
    assert data["estado"] == "pendiente"
    assert data["programado"] is True


@pytest.mark.parametrize("estado", list(EstadoTransmision))
def test_estado_de_celda_sigue_al_reporte(filial, programa, estado):
    reporte = Reporte(id=1, filial_id=1, programa_id=10, fecha=date(2024, 1, 1), estado=estado)
    celda = construir_celda(filial, programa, date(2024, 1, 1), [reporte])
    assert celda.estado is EstadoCelda.desde_reporte(estado)
    assert celda.estado.value == estado.value
