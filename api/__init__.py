# --------------------------------------------------------------
# File: __init__.py
# Description: Capa de servicios que consume la interfaz de usuario.
# --------------------------------------------------------------
"""Inicializa el paquete `api` con los manejadores de cifrado de texto."""

__all__ = ["services"]
