# cubus/render/net.py
from __future__ import annotations

from typing import Dict, List, Optional

from rich.console import Console
from rich.text import Text

from cubus.core.cube_model import Color, CubeModel

# Estilo de cada color en la terminal (letra + fondo)
COLOR_STYLES: Dict[Color, str] = {
    "R": "bold white on red",
    "O": "bold black on dark_orange",
    "W": "bold black on bright_white",
    "Y": "bold black on yellow",
    "G": "bold black on green",
    "B": "bold white on blue",
}


def _row_text(row: List[Color]) -> Text:
    return Text(" ").join(Text(c, style=COLOR_STYLES.get(c, "")) for c in row)


def net_lines(cube: CubeModel) -> List[Text]:
    """Arma el desarrollo plano del cubo, una línea de texto por fila de stickers.

    Disposición:
            U
        L   F   R   B
            D

    Args:
        cube: Cubo a dibujar.

    Returns:
        Lista de `rich.text.Text` con estilos de color.
    """
    grids = cube.facets()
    n = cube.size
    indent = " " * (2 * n + 1)

    lines: List[Text] = []
    for row in grids["U"]:
        lines.append(Text(indent) + _row_text(row))
    for r in range(n):
        line = Text()
        for i, face in enumerate(("L", "F", "R", "B")):
            if i:
                line.append("  ")
            line.append_text(_row_text(grids[face][r]))
        lines.append(line)
    for row in grids["D"]:
        lines.append(Text(indent) + _row_text(row))
    return lines


def render_net(cube: CubeModel) -> str:
    """Versión sin colores del desarrollo plano (útil para logs y tests)."""
    return "\n".join(line.plain for line in net_lines(cube))


def print_net(cube: CubeModel, console: Optional[Console] = None) -> None:
    """Imprime el desarrollo plano del cubo. Sin terminal, sale sin colores."""
    console = console or Console()
    for line in net_lines(cube):
        console.print(line, highlight=False, soft_wrap=True)
