"""
Tests para el cliente HTTP del backend
"""

from unittest.mock import Mock

import pytest
import requests

from transmisiones_api.exceptions import BackendError, BackendUnavailableError, NotFoundError
from transmisiones_api.services.backend_client import BackendClient

pytestmark = pytest.mark.unit


def _response(status=200, json_data=None, text=""):
    resp = Mock()
    resp.status_code = status
    if json_data is not None:
        resp.content = b"x"
        resp.json.return_value = json_data
    else:
        resp.content = text.encode()
        resp.text = text
        resp.json.side_effect = ValueError("no json")
    return resp


@pytest.fixture
def session():
    s = Mock(spec=requests.Session)
    s.headers = {}
    return s


@pytest.fixture
def client(session):
    return BackendClient(base_url="http://backend.test/", timeout=3, session=session)


def test_url_y_timeout(client, session):
    session.request.return_value = _response(json_data=[{"id": 1}])
    assert client.listar_filiales() == [{"id": 1}]
    session.request.assert_called_once_with("GET", "http://backend.test/filial/listar", timeout=3)
    assert session.headers["Content-Type"] == "application/json"


def test_reportes_por_rango_usa_query_params(client, session):
    session.request.return_value = _response(json_data=[])
    client.reportes_por_rango("2024-01-01", "2024-01-07")
    session.request.assert_called_once_with(
        "GET",
        "http://backend.test/reporte/rango",
        timeout=3,
        params={"fechaInicio": "2024-01-01", "fechaFin": "2024-01-07"},
    )


def test_listado_404_es_lista_vacia(client, session):
    session.request.return_value = _response(status=404)
    assert client.listar_reportes() == []


def test_listado_con_cuerpo_inesperado(client, session):
    session.request.return_value = _response(json_data={"error": "x"})
    assert client.listar_programas() == []


def test_obtener_404(client, session):
    session.request.return_value = _response(status=404)
    with pytest.raises(NotFoundError):
        client.obtener_filial(9)


def test_error_http(client, session):
    session.request.return_value = _response(status=500, json_data={"message": "boom"})
    with pytest.raises(BackendError) as exc:
        client.crear_filial({"nombre": "x"})
    assert exc.value.status == 500
    assert exc.value.payload == {"message": "boom"}


def test_backend_caido(client, session):
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(BackendUnavailableError):
        client.listar_filiales()


def test_timeout(client, session):
    session.request.side_effect = requests.Timeout("slow")
    with pytest.raises(BackendUnavailableError):
        client.obtener_programa(1)


def test_crear_reporte_envia_array(client, session):
    session.request.return_value = _response(json_data=[{"id": 7}])
    assert client.crear_reporte({"fecha": "2024-01-01"}) == {"id": 7}
    args, kwargs = session.request.call_args
    assert args == ("POST", "http://backend.test/reporte/add")
    assert kwargs["json"] == [{"fecha": "2024-01-01"}]


def test_asignar_filiales(client, session):
    session.request.return_value = _response(text="")
    client.asignar_filiales(10, ["1", 2])
    args, kwargs = session.request.call_args
    assert args == ("PUT", "http://backend.test/programa/10/filiales")
    assert kwargs["json"] == {"filialIds": [1, 2]}


def test_respuesta_vacia(client, session):
    session.request.return_value = _response(text="")
    assert client.actualizar_filial(1, {"nombre": "x"}) == {}
