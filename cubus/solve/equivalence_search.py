# cubus/solve/equivalence_search.py
from __future__ import annotations

import logging
from typing import Callable, Dict, List, NamedTuple, Optional, Set, Tuple

from cubus.core.cube_model import CubeModel
from cubus.core.move import AXES, Move
from cubus.logic.moves import render_sequence

logger = logging.getLogger(__name__)

OnDepthCallback = Callable[[int], None]


class SearchResult(NamedTuple):
    """Resultado de `find_moves`.

    Attributes:
        sequences: Secuencias encontradas (más cortas primero, y dentro de un
            mismo largo en el orden del alfabeto).
        moves: Cantidad de movimientos exploratorios realizados.
    """

    sequences: List[str]
    moves: int


def move_alphabet(size: int) -> Tuple[Move, ...]:
    """Devuelve el alfabeto de movimientos de la búsqueda, en su orden fijo.

    Orden: X (capas 0..N-1), x, Y, y, Z, z. Solo cuartos de vuelta sobre una
    capa; los giros del cubo completo no forman parte del alfabeto.

    Args:
        size: Arista del cubo.

    Returns:
        Tupla de 6*size movimientos.
    """
    return tuple(
        Move(axis, layer, turns)
        for axis in AXES
        for turns in (+1, -1)
        for layer in range(size)
    )


def find_moves(
    max_len: int,
    source: CubeModel,
    target: CubeModel,
    on_depth: Optional[OnDepthCallback] = None,
) -> SearchResult:
    """Busca todas las secuencias, de hasta `max_len` cuartos de vuelta, que
    llevan `source` a `target`.

    Recorre las secuencias en profundidad, probando el alfabeto en orden, con
    podas simples:
    - No gira una capa en sentido opuesto a su último movimiento ("X1 x1").
    - No gira la misma capa tres veces seguidas en el mismo sentido.
    - No hace un doble giro ("X1 X1") si otra secuencia del mismo largo,
      anterior en el orden del alfabeto, ya hizo el doble opuesto ("x1 x1")
      sobre esa capa.

    Una secuencia que alcanza `target` se registra y no se sigue extendiendo.

    Args:
        max_len: Largo máximo de las secuencias.
        source: Cubo de partida.
        target: Cubo que se quiere reproducir.
        on_depth: Callback opcional que se llama la primera vez que se
            prueban secuencias de cada largo (1, 2, ...).

    Returns:
        `SearchResult` con las secuencias (texto, orden cronológico de los
        movimientos) y el total de movimientos exploratorios.

    Raises:
        ValueError: Si los cubos son de distinto tamaño.

    Notes:
        - No hay detección de ciclos: un mismo estado alcanzado por caminos
          distintos se explora de nuevo.
        - El costo crece como (6*N)^max_len; con N o max_len grandes la
          búsqueda agota el tiempo disponible.
    """
    if source.size != target.size:
        raise ValueError("Los cubos son de distinto tamaño")

    alphabet = move_alphabet(source.size)

    # Estado -> últimos movimientos que desde él llegan a target
    last_hits: Dict[CubeModel, Set[Move]] = {}
    for mv in alphabet:
        last_hits.setdefault(target.moved(mv.inverse()), set()).add(mv)

    found: List[List[str]] = [[] for _ in range(max(max_len, 0) + 1)]
    # Dobles giros ya hechos, por largo de la secuencia que se extiende
    doubles: List[Set[Move]] = [set() for _ in range(max(max_len, 0))]
    path: List[Move] = []
    move_num = 0
    deepest = 0

    def _dfs(cube: CubeModel) -> None:
        nonlocal move_num, deepest

        trc_len = len(path)
        if cube == target:
            found[trc_len].append(render_sequence(path))
            return

        if trc_len >= max_len:
            return

        nxt_len = trc_len + 1
        if nxt_len > deepest:
            deepest = nxt_len
            logger.debug("Explorando secuencias de largo %d", nxt_len)
            if on_depth is not None:
                on_depth(nxt_len)

        prev = path[-1] if trc_len > 0 else None
        prev_inv = prev.inverse() if prev is not None else None
        prev2 = path[-2] if trc_len > 1 else None
        level_doubles = doubles[trc_len]
        is_last = nxt_len >= max_len
        hits = last_hits.get(cube, ()) if is_last else ()

        for mv in alphabet:
            # Poda 1: no deshacer el último movimiento
            if mv == prev_inv:
                continue

            # Poda 2: no girar la misma capa tres veces seguidas
            if prev2 is not None and mv == prev == prev2:
                continue

            # Poda 3: no hacer un doble si ya se hizo el doble opuesto en este largo
            is_double = mv == prev
            if is_double and mv.inverse() in level_doubles:
                continue

            if is_last:
                # Último movimiento posible: basta con saber si llega a target
                if mv in hits:
                    found[nxt_len].append(render_sequence(path + [mv]))
            else:
                path.append(mv)
                _dfs(cube.moved(mv))
                path.pop()

            if is_double:
                level_doubles.add(mv)

            move_num += 1

    _dfs(source)

    sequences = [seq for by_len in found for seq in by_len]
    logger.info("%d secuencias a partir de %d movimientos exploratorios", len(sequences), move_num)
    return SearchResult(sequences, move_num)
