from dataclasses import dataclass, asdict
from datetime import date
from typing import Any, Dict, Optional, Tuple

from transmisiones_api.core.estados import EstadoCelda, EstadoTransmision


@dataclass(frozen=True)
class Filial:
    id: int
    nombre: str
    activa: bool = True
    programa_ids: Tuple[int, ...] = tuple()
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "nombre": self.nombre,
            "activa": self.activa,
            "programaIds": list(self.programa_ids),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class Programa:
    id: int
    nombre: str
    activo: bool = True
    hora_inicio: str = ""
    dias_semana: Tuple[str, ...] = tuple()
    filiales_ids: Tuple[int, ...] = tuple()
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "nombre": self.nombre,
            "activo": self.activo,
            "horaInicio": self.hora_inicio,
            "diasSemana": list(self.dias_semana),
            "filialesIds": list(self.filiales_ids),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class Reporte:
    filial_id: int
    programa_id: int
    fecha: date
    estado: EstadoTransmision = EstadoTransmision.PENDIENTE
    id: Optional[int] = None
    hora_real: Optional[str] = None
    hora_programada: Optional[str] = None
    target: Optional[str] = None
    motivo: Optional[str] = None
    observaciones: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def clave(self) -> Tuple[int, int, date]:
        return (self.filial_id, self.programa_id, self.fecha)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id_reporte": self.id,
            "filialId": self.filial_id,
            "programaId": self.programa_id,
            "fecha": self.fecha.isoformat(),
            "estado": self.estado.value,
            "horaReal": self.hora_real,
            "horaProgramada": self.hora_programada,
            "target": self.target,
            "motivo": self.motivo,
            "observaciones": self.observaciones,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class Celda:
    filial_id: int
    programa_id: int
    fecha: date
    estado: EstadoCelda
    reporte_id: Optional[int] = None
    hora_programada: Optional[str] = None
    hora_real: Optional[str] = None
    target: Optional[str] = None
    motivo: Optional[str] = None
    ambiguo: bool = False

    @property
    def programado(self) -> bool:
        return self.estado is not EstadoCelda.NO_PROGRAMADO

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["fecha"] = self.fecha.isoformat()
        data["estado"] = self.estado.value
        data["programado"] = self.programado
        return data
