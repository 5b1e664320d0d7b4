"""Transmisiones API - control de transmisiones por filial y programa."""

__version__ = "1.0.0"
