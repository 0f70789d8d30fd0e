"""Configuración de logging (stdlib).

El entrypoint de la función y la CLI llaman a `configure_logging` una vez;
el resto de módulos solo hace `logging.getLogger(__name__)`.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level)
    if root.handlers:
        # Runtimes tipo Lambda ya instalan un handler propio.
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
