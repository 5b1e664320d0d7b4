"""
Transmisiones API Request Models

Pydantic models for the request bodies of the branch, program and report
endpoints. Field names follow the JSON used by the web frontend.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class FilialInput(BaseModel):
    """Filial create/update payload"""
    nombre: str = Field(..., min_length=1, max_length=255)
    activa: bool = True


class ProgramaInput(BaseModel):
    """Programa create/update payload"""
    nombre: str = Field(..., min_length=1, max_length=255)
    activo: bool = True
    diasSemana: List[str] = Field(default_factory=list, description="Días de transmisión, con o sin tildes")
    horaInicio: Optional[str] = Field(None, description="Hora de inicio HH:MM")
    filialIds: List[int] = Field(default_factory=list)


class ReporteInput(BaseModel):
    """Report payload for one (filial, programa, fecha) cell"""
    filialId: int
    programaId: int
    fecha: str = Field(..., description="YYYY-MM-DD o DD/MM/YYYY")
    estado: str = Field("pendiente", description="pendiente | si | no | tarde")
    id_reporte: Optional[int] = None
    horaReal: Optional[str] = None
    horaProgramada: Optional[str] = None
    target: Optional[str] = None
    motivo: Optional[str] = None
    observaciones: Optional[str] = None
