# Transmisiones API Models Package
from transmisiones_api.models.schemas import FilialInput, ProgramaInput, ReporteInput

__all__ = ["FilialInput", "ProgramaInput", "ReporteInput"]
