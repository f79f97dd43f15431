"""Modelos y entidades del dominio.

- Estructuras de datos puras (Pydantic v2), taxonomía de errores y codec JSON.
- El dominio no conoce httpx, CLI ni UI.
"""
