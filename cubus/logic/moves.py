# cubus/logic/moves.py
from __future__ import annotations

import re
from typing import Iterable, List, Optional

from cubus.core.move import Axis, Move

VALID_AXES: str = "XYZxyz"

# [repetición 2..9] eje [capa]
TOKEN_RE = re.compile(rf"([2-9]?)([{VALID_AXES}])([0-9]?)")

# Dentro de un texto: espacios y comentarios ("#" hasta fin de línea) se ignoran
_SKIP_RE = re.compile(r"(?:\s+|#[^\n]*)+")


class MoveParseError(ValueError):
    """Token de movimiento mal formado.

    Attributes:
        token: Texto que no se pudo interpretar.
    """

    def __init__(self, token: str, reason: str = "movimiento inválido") -> None:
        super().__init__(f"{reason}: {token!r}")
        self.token = token
        self.reason = reason


class InvalidLayerError(MoveParseError):
    """La capa del token no existe en un cubo de la arista dada."""

    def __init__(self, token: str, size: int) -> None:
        super().__init__(token, f"capa fuera de rango (0..{size - 1})")
        self.size = size


def _build_move(token: str, count: str, letter: str, digit: str, size: Optional[int]) -> Move:
    turns = int(count) if count else 1
    if letter.islower():
        turns = -turns

    layer: Optional[int] = None
    if digit:
        layer = int(digit)
        if size is not None and layer >= size:
            raise InvalidLayerError(token, size)

    axis: Axis = letter.lower()  # type: ignore[assignment]
    return Move(axis, layer, turns)


def parse_token(token: str, size: Optional[int] = None) -> Move:
    """Convierte un token de texto en un `Move`.

    Formato: `[2-9]? [XYZxyz] [0-9]?`
        - Prefijo opcional: cantidad de cuartos de vuelta (2..9).
        - Eje en mayúscula: giro antihorario; en minúscula: horario.
        - Dígito de capa (0 = izquierda/abajo/atrás). Sin dígito, gira el cubo completo.

    Ejemplos:
        - "X1"  -> Move("x", 1, 1)
        - "2X1" -> Move("x", 1, 2)
        - "3z0" -> Move("z", 0, -3)
        - "y"   -> Move("y", None, -1)

    Args:
        token: Token a interpretar.
        size: Arista del cubo, para validar la capa. None no valida.

    Returns:
        El movimiento correspondiente.

    Raises:
        MoveParseError: Si el token no respeta el formato.
        InvalidLayerError: Si la capa no es menor que `size`.
    """
    tok = token.strip()
    m = TOKEN_RE.fullmatch(tok)
    if m is None:
        raise MoveParseError(token)
    return _build_move(tok, m.group(1), m.group(2), m.group(3), size)


def render_move(move: Move) -> str:
    """Devuelve la forma textual de un movimiento (inversa de `parse_token`).

    Raises:
        ValueError: Si el movimiento no se puede escribir con un solo token.
    """
    count = abs(move.turns)
    if not 1 <= count <= 9:
        raise ValueError(f"Giro no representable: {move.turns}")

    letter = move.axis.upper() if move.turns > 0 else move.axis.lower()
    prefix = str(count) if count > 1 else ""
    layer = "" if move.is_whole_cube else str(move.layer)
    return prefix + letter + layer


def inverse_move(token: str) -> str:
    """Devuelve el token inverso.

    Ejemplos:
        - "X1"  -> "x1"
        - "2y0" -> "2Y0"
        - "Z"   -> "z"
    """
    return render_move(parse_token(token).inverse())


def parse_sequence(text: str, size: Optional[int] = None) -> List[Move]:
    """Convierte una secuencia escrita como texto en una lista de movimientos.

    Los tokens pueden ir pegados ("X1Y2") o separados por espacios o saltos
    de línea. Un "#" inicia un comentario hasta el final de la línea.

    Args:
        text: Secuencia de movimientos.
        size: Arista del cubo, para validar las capas.

    Returns:
        Lista de movimientos, en el mismo orden.

    Raises:
        MoveParseError: Si algún fragmento no es un token válido.
    """
    out: List[Move] = []
    pos = 0
    end = len(text)
    while pos < end:
        skip = _SKIP_RE.match(text, pos)
        if skip is not None:
            pos = skip.end()
            continue

        m = TOKEN_RE.match(text, pos)
        if m is None:
            # Reportamos el fragmento hasta el próximo separador
            bad = re.match(r"[^\s#]+", text[pos:])
            raise MoveParseError(bad.group(0) if bad else text[pos])

        out.append(_build_move(m.group(0), m.group(1), m.group(2), m.group(3), size))
        pos = m.end()
    return out


def render_sequence(moves: Iterable[Move], sep: str = "") -> str:
    """Concatena la forma textual de cada movimiento."""
    return sep.join(render_move(mv) for mv in moves)


def quarter_turns(moves: Iterable[Move]) -> List[Move]:
    """Expande los giros múltiples en cuartos de vuelta ("2X1" -> X1, X1)."""
    out: List[Move] = []
    for mv in moves:
        out.extend(mv.quarters())
    return out


def inverse_sequence(moves: Iterable[Move]) -> List[Move]:
    """Secuencia que deshace `moves`: inversos en orden contrario."""
    return [mv.inverse() for mv in reversed(list(moves))]
