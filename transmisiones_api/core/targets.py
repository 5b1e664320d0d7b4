"""
Targets y motivos

Los formularios usan abreviaturas (``Fta``, ``P.Tec``...) y el backend el
texto completo (``Falta``, ``Problema técnico``...). ``Otros`` es el único
target que admite un motivo libre; en el backend se llama ``Otro``.
"""

from typing import Dict, List, Optional, Tuple

OTROS = "Otros"
OTRO_BACKEND = "Otro"

TARGET_A_BACKEND: Dict[str, str] = {
    "Fta": "Falta",
    "Enf": "Enfermedad",
    "P.Tec": "Problema técnico",
    "F.Serv": "Falla de servicios",
    "Tde": "Tarde",
    OTROS: OTRO_BACKEND,
}

BACKEND_A_TARGET: Dict[str, str] = {v: k for k, v in TARGET_A_BACKEND.items()}

ETIQUETAS: Dict[str, str] = {
    "Fta": "Falta (Fta)",
    "Enf": "Enfermedad (Enf)",
    "P.Tec": "Problema técnico (P. Tec)",
    "F.Serv": "Falla de servicios (F. Serv)",
    "Tde": "Tarde (Tde)",
    OTROS: "Otros",
}

# Targets admitidos por estado
TARGETS_NO_TRANSMISION: Tuple[str, ...] = ("Fta", "Enf", "P.Tec", "F.Serv", OTROS)
TARGETS_RETRASO: Tuple[str, ...] = ("Tde", "P.Tec", "F.Serv", OTROS)


def a_backend(target: Optional[str]) -> Optional[str]:
    if not target:
        return None
    if target in (OTROS, OTRO_BACKEND):
        return OTRO_BACKEND
    return TARGET_A_BACKEND.get(target, target)


def a_frontend(valor: Optional[str]) -> Optional[str]:
    if not valor:
        return None
    if valor in (OTROS, OTRO_BACKEND):
        return OTROS
    return BACKEND_A_TARGET.get(valor, valor)


def requiere_motivo(target: Optional[str]) -> bool:
    return target in (OTROS, OTRO_BACKEND)


def motivo_efectivo(target: Optional[str], motivo: Optional[str]) -> Optional[str]:
    """El motivo sólo tiene sentido junto a ``Otros``; en otro caso es None."""
    if not requiere_motivo(target):
        return None
    if motivo is None:
        return None
    motivo = str(motivo)
    return motivo if motivo.strip() else None


def es_target_valido(target: Optional[str]) -> bool:
    return bool(target) and (target == OTRO_BACKEND or target in TARGET_A_BACKEND)


def etiqueta_target(target: Optional[str]) -> str:
    if not target:
        return ""
    return ETIQUETAS.get(a_frontend(target) or "", target)


def target_desde_motivo(motivo: Optional[str]) -> Optional[str]:
    """Infiere el target de un motivo libre (reportes viejos sin target)."""
    if not motivo:
        return None
    for backend, abbr in BACKEND_A_TARGET.items():
        if backend in motivo:
            return abbr
    if "tarde" in motivo.lower():
        return "Tde"
    return None


def targets_para_estado(estado) -> Tuple[str, ...]:
    valor = getattr(estado, "value", estado)
    if valor == "no":
        return TARGETS_NO_TRANSMISION
    if valor == "tarde":
        return TARGETS_RETRASO
    return tuple()


def opciones(targets: Tuple[str, ...]) -> List[Dict[str, str]]:
    return [{"value": t, "label": etiqueta_target(t)} for t in targets]
