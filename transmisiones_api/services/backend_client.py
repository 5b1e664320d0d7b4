"""
Backend Client - HTTP access to the transmissions backend

Thin wrapper over ``requests``: builds URLs, applies the timeout and turns
HTTP failures into ``BackendError``. Payloads are returned exactly as the
backend sends them; shape reconciliation lives in ``services.adapter``.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from transmisiones_api.config import get_settings
from transmisiones_api.exceptions import BackendError, BackendUnavailableError, NotFoundError

logger = logging.getLogger(__name__)


class BackendClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.backend_url).rstrip("/")
        self.timeout = timeout or settings.backend_timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.error(f"Backend unavailable on {method} {path}: {e}")
            raise BackendUnavailableError(f"Backend no disponible: {e}") from e
        except requests.RequestException as e:
            logger.error(f"Backend request failed on {method} {path}: {e}")
            raise BackendError(str(e)) from e

        try:
            data = resp.json() if resp.content else None
        except ValueError:
            data = resp.text

        if resp.status_code == 404:
            raise NotFoundError(f"{method} {path}: no encontrado")
        if resp.status_code >= 400:
            logger.error(f"Backend error {resp.status_code} on {method} {path}: {data}")
            raise BackendError(
                f"HTTP {resp.status_code} en {method} {path}",
                status=resp.status_code,
                payload=data,
            )
        return data

    def _list(self, path: str, **kwargs) -> List[Dict[str, Any]]:
        try:
            data = self._request("GET", path, **kwargs)
        except NotFoundError:
            return []
        if not isinstance(data, list):
            return []
        return [d for d in data if isinstance(d, dict)]

    # === Filiales ===

    def listar_filiales(self) -> List[Dict[str, Any]]:
        return self._list("/filial/listar")

    def obtener_filial(self, filial_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/filial/{int(filial_id)}") or {}

    def crear_filial(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/filial", json=payload) or {}

    def actualizar_filial(self, filial_id: int, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/filial/{int(filial_id)}", json=payload) or {}

    def eliminar_filial(self, filial_id: int) -> None:
        self._request("DELETE", f"/filial/{int(filial_id)}")

    # === Programas ===

    def listar_programas(self) -> List[Dict[str, Any]]:
        return self._list("/programa/listar")

    def obtener_programa(self, programa_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/programa/{int(programa_id)}") or {}

    def crear_programa(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/programa", json=payload) or {}

    def actualizar_programa(self, programa_id: int, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/programa/{int(programa_id)}", json=payload) or {}

    def asignar_filiales(self, programa_id: int, filial_ids: List[int]) -> Any:
        return self._request(
            "PUT",
            f"/programa/{int(programa_id)}/filiales",
            json={"filialIds": [int(x) for x in filial_ids]},
        )

    def eliminar_programa(self, programa_id: int) -> None:
        self._request("DELETE", f"/programa/{int(programa_id)}")

    # === Reportes ===

    def listar_reportes(self) -> List[Dict[str, Any]]:
        return self._list("/reporte/listar")

    def reportes_por_rango(self, fecha_inicio: str, fecha_fin: str) -> List[Dict[str, Any]]:
        return self._list(
            "/reporte/rango",
            params={"fechaInicio": fecha_inicio, "fechaFin": fecha_fin},
        )

    def crear_reporte(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        # El endpoint espera un array de reportes
        data = self._request("POST", "/reporte/add", json=[payload])
        if isinstance(data, list):
            return data[0] if data else {}
        return data or {}

    def actualizar_reporte(self, reporte_id: int, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/reporte/{int(reporte_id)}", json=payload) or {}
