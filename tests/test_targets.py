"""
Tests para el mapeo de targets y motivos
"""

import pytest

from transmisiones_api.core.estados import EstadoTransmision
from transmisiones_api.core.targets import (
    BACKEND_A_TARGET,
    TARGET_A_BACKEND,
    TARGETS_NO_TRANSMISION,
    TARGETS_RETRASO,
    a_backend,
    a_frontend,
    es_target_valido,
    etiqueta_target,
    motivo_efectivo,
    opciones,
    requiere_motivo,
    target_desde_motivo,
    targets_para_estado,
)

pytestmark = pytest.mark.unit


def test_mapeo_basico():
    assert a_backend("Fta") == "Falta"
    assert a_backend("P.Tec") == "Problema técnico"
    assert a_frontend("Falla de servicios") == "F.Serv"
    assert a_frontend("Tarde") == "Tde"


def test_otros_siempre_mapea_al_lado_correcto():
    assert a_backend("Otros") == "Otro"
    assert a_backend("Otro") == "Otro"
    assert a_frontend("Otro") == "Otros"
    assert a_frontend("Otros") == "Otros"


def test_vacios_y_desconocidos():
    assert a_backend(None) is None
    assert a_backend("") is None
    assert a_frontend(None) is None
    assert a_backend("Granizo") == "Granizo"
    assert a_frontend("Granizo") == "Granizo"


@pytest.mark.parametrize("code", list(TARGET_A_BACKEND))
def test_ida_y_vuelta_codigos(code):
    assert a_frontend(a_backend(code)) == code


@pytest.mark.parametrize("valor", list(BACKEND_A_TARGET))
def test_ida_y_vuelta_valores_backend(valor):
    assert a_backend(a_frontend(valor)) == valor


def test_motivo_solo_con_otros():
    assert requiere_motivo("Otros")
    assert requiere_motivo("Otro")
    assert not requiere_motivo("Fta")
    assert motivo_efectivo("Otros", "Corte de luz") == "Corte de luz"
    assert motivo_efectivo("Fta", "Corte de luz") is None
    assert motivo_efectivo("Otros", "   ") is None


def test_targets_por_estado():
    assert targets_para_estado(EstadoTransmision.NO) == TARGETS_NO_TRANSMISION
    assert targets_para_estado("tarde") == TARGETS_RETRASO
    assert targets_para_estado(EstadoTransmision.SI) == ()
    assert "Tde" not in TARGETS_NO_TRANSMISION
    assert "Fta" not in TARGETS_RETRASO


def test_validez_y_etiquetas():
    assert es_target_valido("Enf")
    assert es_target_valido("Otro")
    assert not es_target_valido("Falta")
    assert etiqueta_target("Falta") == "Falta (Fta)"
    assert etiqueta_target(None) == ""


def test_target_desde_motivo():
    assert target_desde_motivo("Problema técnico en el estudio") == "P.Tec"
    assert target_desde_motivo("llegó tarde el conductor") == "Tde"
    assert target_desde_motivo("sin datos") is None
    assert target_desde_motivo(None) is None


def test_opciones():
    items = opciones(TARGETS_RETRASO)
    assert [o["value"] for o in items] == list(TARGETS_RETRASO)
    assert all(o["label"] for o in items)


def test_opciones_usan_las_etiquetas():
    assert opciones(("P.Tec",)) == [{"value": "P.Tec", "label": etiqueta_target("Problema técnico")}]
