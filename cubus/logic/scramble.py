# cubus/logic/scramble.py
from __future__ import annotations

import random
from typing import List, Optional

from cubus.core.move import AXES, Move


def random_sequence(n: int, size: int, seed: Optional[int] = None) -> List[Move]:
    """Genera una secuencia aleatoria de cuartos de vuelta para un cubo de arista `size`.

    Nunca elige el inverso del movimiento anterior (por ejemplo, evita "X1 x1"
    seguidos), así la secuencia no se anula a sí misma de inmediato.

    Args:
        n: Cantidad de movimientos a generar.
        size: Arista del cubo (las capas van de 0 a size-1).
        seed: Semilla opcional para obtener resultados reproducibles.

    Returns:
        Lista de `Move` con `turns` igual a +1 o -1.

    Raises:
        ValueError: Si `n` es menor o igual a 0.
    """
    if n <= 0:
        raise ValueError("n debe ser mayor que 0.")

    rng = random.Random(seed)

    seq: List[Move] = []
    last: Optional[Move] = None

    for _ in range(n):
        while True:
            mv = Move(rng.choice(AXES), rng.randrange(size), rng.choice((1, -1)))
            if last is None or mv != last.inverse():
                break
        seq.append(mv)
        last = mv

    return seq
