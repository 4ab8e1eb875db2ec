# cubus/core/move.py
from __future__ import annotations

from typing import List, Literal, NamedTuple, Optional

Axis = Literal["x", "y", "z"]

AXES: List[Axis] = ["x", "y", "z"]


class Move(NamedTuple):
    """Giro de una capa (o del cubo completo) alrededor de un eje.

    Attributes:
        axis: Eje de rotación ('x', 'y' o 'z').
        layer: Coordenada de la capa sobre el eje (0 = izquierda/abajo/atrás),
            o None para rotar el cubo completo.
        turns: Cuartos de vuelta con signo. Positivo = antihorario (+90° por
            giro, regla de la mano derecha), negativo = horario.
    """

    axis: Axis
    layer: Optional[int]
    turns: int = 1

    def inverse(self) -> "Move":
        """Devuelve el movimiento que deshace este (mismo eje y capa, giro opuesto)."""
        return Move(self.axis, self.layer, -self.turns)

    def quarters(self) -> List["Move"]:
        """Descompone el movimiento en cuartos de vuelta.

        Un giro de 4 (o múltiplo) no cambia el estado, pero sigue contando
        como 4 cuartos de vuelta.
        """
        step = 1 if self.turns > 0 else -1
        return [Move(self.axis, self.layer, step)] * abs(self.turns)

    @property
    def is_whole_cube(self) -> bool:
        return self.layer is None


def inverse(move: Move) -> Move:
    return move.inverse()
