"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2), los
  errores tipados y la transformación del listado.
- El dominio no conoce HTTP, CLI, ni el runtime serverless: solo conceptos del problema.
"""
