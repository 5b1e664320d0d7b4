from typing import Any, List, Optional


class TransmisionesError(Exception):
    """Base de los errores de la API de transmisiones."""

    code = "error"
    status_code = 500


class BackendError(TransmisionesError):
    code = "backend_error"
    status_code = 502

    def __init__(self, message: str, status: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status = status
        self.payload = payload


class BackendUnavailableError(BackendError):
    code = "backend_unavailable"


class NotFoundError(TransmisionesError):
    code = "not_found"
    status_code = 404


class ValidacionError(TransmisionesError):
    code = "validation_error"
    status_code = 400

    def __init__(self, errores: List[str]):
        super().__init__(", ".join(errores) or "datos inválidos")
        self.errores = list(errores)


class TransicionInvalidaError(TransmisionesError):
    code = "transicion_invalida"
    status_code = 409

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        if code:
            self.code = code
