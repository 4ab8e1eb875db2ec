# cubus/app/cli.py
"""Interfaz de línea de comandos de cubus.

Dibuja un cubo de arista N después de aplicar una secuencia de movimientos
al cubo resuelto y, con N negativo, busca todas las secuencias no más largas
que producen exactamente el mismo estado.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional, Sequence

from rich.console import Console

from cubus.core.cube_model import MAX_SIZE, CubeModel
from cubus.core.move import Move
from cubus.logic.moves import MoveParseError, parse_sequence, quarter_turns
from cubus.render.net import print_net
from cubus.solve.equivalence_search import SearchResult, find_moves

logger = logging.getLogger(__name__)

# Secuencias por fila en la tabla de resultados
SEQUENCES_PER_ROW = 4

DESCRIPTION = "Simulación del cubo de Ernő Rubik."

EPILOG = f"""\
Dibuja un cubo de arista |N| (1 <= |N| <= {MAX_SIZE}) después de aplicar MOVES
al cubo resuelto. Con N negativo, además lista todas las secuencias de
largo no mayor (en cuartos de vuelta) que producen el mismo estado.

Cada movimiento es «eje»«capa», con un prefijo opcional de repetición 2..9.
El eje es X, Y, Z, x, y o z: mayúscula gira +90° (antihorario) y minúscula
-90° (horario) alrededor de ese eje, que atraviesa el centro del cubo. La
capa es un dígito 0 <= capa < N (0 = capa izquierda / inferior / trasera);
sin dígito se gira el cubo completo. Un "#" inicia un comentario.

Ejemplo: cubus -3 2X1 2Y1 2Z1
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cubus",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "size",
        metavar="N",
        type=int,
        help="Arista del cubo; negativo para buscar secuencias equivalentes",
    )
    parser.add_argument(
        "moves",
        metavar="MOVES",
        nargs="*",
        help="Movimientos, por ejemplo: X1 2y0 Z2",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        dest="loglevel",
        action="store_const",
        const=logging.INFO,
        default=logging.WARNING,
        help="Muestra el progreso de la búsqueda",
    )
    return parser


def plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def format_result(result: SearchResult) -> List[str]:
    """Arma las líneas de salida de una búsqueda.

    Returns:
        La línea de resumen seguida de la tabla de secuencias, con
        `SEQUENCES_PER_ROW` secuencias por fila separadas por tabulaciones.
    """
    seqs = result.sequences
    lines = [
        f"{plural(len(seqs), 'sequence')} from {plural(result.moves, 'exploratory move')}:"
    ]
    for i in range(0, len(seqs), SEQUENCES_PER_ROW):
        lines.append("\t".join(seqs[i:i + SEQUENCES_PER_ROW]))
    return lines


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Punto de entrada del comando `cubus`.

    Args:
        argv: Argumentos (sin el nombre del programa). None usa `sys.argv`.

    Returns:
        Código de salida (0 si todo salió bien). Los argumentos inválidos
        terminan el proceso con código 2 a través de `argparse`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.loglevel,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    size = abs(args.size)
    find_mode = args.size < 0
    if not 1 <= size <= MAX_SIZE:
        parser.error(f"argumento N: tamaño inválido {args.size} (1 <= |N| <= {MAX_SIZE})")

    # Un comentario termina con su argumento
    moves: List[Move] = []
    for arg in args.moves:
        try:
            moves.extend(parse_sequence(arg, size))
        except MoveParseError as exc:
            parser.error(f"argumento MOVES {arg!r}: {exc.reason}: {exc.token!r}")
    move_text = "\n".join(args.moves)

    source = CubeModel.solved(size)
    target = source.apply_sequence(moves)
    logger.info("Cubo %dx%dx%d, %d movimientos", size, size, size, len(moves))

    print_net(target, Console())
    print(move_text)

    if find_mode:
        max_len = len(quarter_turns(moves))
        logger.info("Buscando secuencias de hasta %d movimientos", max_len)
        result = find_moves(
            max_len,
            source,
            target,
            on_depth=lambda depth: logger.info("Profundidad %d", depth),
        )
        _print_lines(format_result(result))

    return 0


if __name__ == "__main__":
    sys.exit(main())
