"""Script de ejecución.

Permite ejecutar la CLI con `python -m main` desde `src/` además del script
`dog-breeds` que instala pyproject.
"""

from __future__ import annotations

import sys

# Las terminales Windows (cp1252) fallan con los caracteres de los paneles Rich.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
