"""
Pytest Configuration
Configuration file for pytest test runner
"""

import pytest
from unittest.mock import Mock

from transmisiones_api.services.backend_client import BackendClient


# Test markers
def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "api: API tests"
    )
    config.addinivalue_line(
        "markers", "slow: Slow running tests"
    )


# Test collection
collect_ignore_glob = [
    "*/venv/*",
    "*/env/*",
    "*/__pycache__/*"
]


# Fixtures
@pytest.fixture
def filial_backend():
    """Filial tal como la devuelve GET /filial/{id}"""
    return {
        "id": 1,
        "nombre": "Filial Centro",
        "isActivo": True,
        "programas": [{"id": 10}],
        "createdAt": "2024-01-01T10:00:00",
        "updateAt": "2024-01-01T10:00:00",
    }


@pytest.fixture
def programa_backend():
    """Programa lunes y miércoles a las 08:00, con tildes y hora estructurada"""
    return {
        "id": 10,
        "nombre": "Noticiero Matutino",
        "isActivo": True,
        "diasSemana": ["Lunes", "Miércoles"],
        "horaInicio": {"hour": 8, "minute": 0, "second": 0, "nano": 0},
        "filiales": [{"id": 1}],
    }


@pytest.fixture
def reporte_backend():
    """Reporte tardío con motivo libre"""
    return {
        "id": 100,
        "filialId": 1,
        "programaId": 10,
        "fecha": "2024-01-03",
        "estadoTransmision": "Tarde",
        "target": "Otro",
        "motivo": "Corte de luz",
        "hora": {"hour": 8, "minute": 0, "second": 0, "nano": 0},
        "hora_tt": {"hour": 8, "minute": 25, "second": 0, "nano": 0},
        "createdAt": "2024-01-03T09:00:00",
        "updateAt": "2024-01-03T09:00:00",
    }


@pytest.fixture
def mock_backend(filial_backend, programa_backend):
    """BackendClient falso con una filial y un programa"""
    client = Mock(spec=BackendClient)
    client.listar_filiales.return_value = [filial_backend]
    client.obtener_filial.return_value = filial_backend
    client.listar_programas.return_value = [programa_backend]
    client.obtener_programa.return_value = programa_backend
    client.listar_reportes.return_value = []
    client.reportes_por_rango.return_value = []
    client.crear_reporte.side_effect = lambda payload: {**payload, "id": 500}
    client.actualizar_reporte.side_effect = lambda rid, payload: {**payload, "id": rid}
    return client
