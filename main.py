# main.py
from __future__ import annotations

import sys
from typing import NoReturn

from cubus.app.cli import main as cli_main


def main() -> NoReturn:
    """Punto de entrada de la aplicación.

    Interpreta los argumentos de la línea de comandos, dibuja el cubo y, si
    corresponde, ejecuta la búsqueda de secuencias equivalentes.

    Returns:
        No retorna (finaliza el proceso con `sys.exit`).
    """
    sys.exit(cli_main(sys.argv[1:]))


if __name__ == "__main__":
    main()
