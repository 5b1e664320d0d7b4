# Motor de conciliación de transmisiones
from transmisiones_api.core.agenda import esta_programado, programa_de_filial
from transmisiones_api.core.dias import normalizar_dia, normalizar_dias
from transmisiones_api.core.estados import EstadoCelda, EstadoTransmision, PRESENTACION
from transmisiones_api.core.fechas import RangoFechas, parse_fecha
from transmisiones_api.core.grilla import construir_grilla, resumir_grilla
from transmisiones_api.core.horas import HoraBackend, hora_a_texto, texto_a_hora
from transmisiones_api.core.models import Celda, Filial, Programa, Reporte
from transmisiones_api.core.resolver import PENDIENTE, buscar_reporte, resolver_reporte
from transmisiones_api.core.targets import a_backend, a_frontend

__all__ = [
    "esta_programado",
    "programa_de_filial",
    "normalizar_dia",
    "normalizar_dias",
    "EstadoCelda",
    "EstadoTransmision",
    "PRESENTACION",
    "RangoFechas",
    "parse_fecha",
    "construir_grilla",
    "resumir_grilla",
    "HoraBackend",
    "hora_a_texto",
    "texto_a_hora",
    "Celda",
    "Filial",
    "Programa",
    "Reporte",
    "PENDIENTE",
    "buscar_reporte",
    "resolver_reporte",
    "a_backend",
    "a_frontend",
]
