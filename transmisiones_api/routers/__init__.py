from transmisiones_api.routers import filiales, programas, reportes, transmisiones

__all__ = ["filiales", "programas", "reportes", "transmisiones"]
