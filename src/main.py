"""Script de ejecución.

Permite ejecutar la CLI con `python -m main` durante desarrollo, además del
script `dog-client` instalado por pip.
"""

from __future__ import annotations

import sys

# Windows terminals (cp1252) cannot print Rich box characters otherwise.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
