# cubus/core/cube_model.py
from __future__ import annotations

from functools import lru_cache
from typing import Callable, Dict, Iterable, List, Literal, Optional, Tuple

from cubus.core.move import Axis, Move

Face = Literal["U", "D", "L", "R", "F", "B"]
Color = str  # Letras: "R", "O", "W", "Y", "G", "B"
Vec3i = Tuple[int, int, int]
Hue = Tuple[Color, ...]  # (xp, xn, yp, yn, zp, zn)
Brick = Tuple[int, int, int, Hue]  # (x, y, z, hue)
CubeHash = Tuple[int, Tuple[int, ...]]

MAX_SIZE = 10

# Índices dentro de Hue
XP, XN, YP, YN, ZP, ZN = range(6)

SOLVED_HUE: Hue = ("R", "O", "W", "Y", "G", "B")

PosRotator = Callable[[int, int, int, int], Vec3i]

# Giro antihorario (+1) y horario (-1) de 90° por eje:
# nueva posición (m = N-1) y permutación del hue (new[i] = old[perm[i]]).
POS_ROT: Dict[Tuple[Axis, int], PosRotator] = {
    ("x", +1): lambda x, y, z, m: (x, m - z, y),
    ("x", -1): lambda x, y, z, m: (x, z, m - y),
    ("y", +1): lambda x, y, z, m: (z, y, m - x),
    ("y", -1): lambda x, y, z, m: (m - z, y, x),
    ("z", +1): lambda x, y, z, m: (m - y, x, z),
    ("z", -1): lambda x, y, z, m: (y, m - x, z),
}
HUE_PERM: Dict[Tuple[Axis, int], Tuple[int, ...]] = {
    ("x", +1): (XP, XN, ZN, ZP, YP, YN),
    ("x", -1): (XP, XN, ZP, ZN, YN, YP),
    ("y", +1): (ZP, ZN, YP, YN, XN, XP),
    ("y", -1): (ZN, ZP, YP, YN, XP, XN),
    ("z", +1): (YN, YP, XP, XN, ZP, ZN),
    ("z", -1): (YP, YN, XN, XP, ZP, ZN),
}
AXIS_INDEX: Dict[Axis, int] = {"x": 0, "y": 1, "z": 2}


class _Geometry:
    """Tablas precalculadas para un cubo de arista N.

    Cada pieza se codifica como un entero `pos * len(hues) + orientación`, y
    cada giro de 90° es una tabla `código -> código`.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        m = size - 1

        # Solo nos interesan las piezas que forman parte de la superficie
        self.positions: List[Vec3i] = [
            (x, y, z)
            for z in range(size)
            for y in range(size)
            for x in range(size)
            if x in (0, m) or y in (0, m) or z in (0, m)
        ]
        self.pos_index: Dict[Vec3i, int] = {p: i for i, p in enumerate(self.positions)}

        # Las 24 orientaciones alcanzables desde el hue resuelto
        self.hues: List[Hue] = [SOLVED_HUE]
        self.hue_index: Dict[Hue, int] = {SOLVED_HUE: 0}
        pending = [SOLVED_HUE]
        while pending:
            hue = pending.pop()
            for perm in HUE_PERM.values():
                nh = tuple(hue[i] for i in perm)
                if nh not in self.hue_index:
                    self.hue_index[nh] = len(self.hues)
                    self.hues.append(nh)
                    pending.append(nh)

        self._tables: Dict[Tuple[Axis, Optional[int], int], Tuple[int, ...]] = {}

    def encode(self, x: int, y: int, z: int, hue: Hue) -> int:
        return self.pos_index[(x, y, z)] * len(self.hues) + self.hue_index[hue]

    def decode(self, code: int) -> Brick:
        p, h = divmod(code, len(self.hues))
        x, y, z = self.positions[p]
        return (x, y, z, self.hues[h])

    def table(self, axis: Axis, layer: Optional[int], step: int) -> Tuple[int, ...]:
        """Tabla de un giro de 90° de una capa (o del cubo completo si `layer` es None)."""
        key = (axis, layer, step)
        tbl = self._tables.get(key)
        if tbl is None:
            m = self.size - 1
            k = AXIS_INDEX[axis]
            rot_pos = POS_ROT[(axis, step)]
            perm = HUE_PERM[(axis, step)]
            out: List[int] = []
            for pos in self.positions:
                for hue in self.hues:
                    if layer is not None and pos[k] != layer:
                        # Las piezas fuera de la capa no cambian
                        out.append(self.encode(*pos, hue))
                        continue
                    nx, ny, nz = rot_pos(*pos, m)
                    out.append(self.encode(nx, ny, nz, tuple(hue[i] for i in perm)))
            tbl = tuple(out)
            self._tables[key] = tbl
        return tbl


@lru_cache(maxsize=None)
def geometry(size: int) -> _Geometry:
    return _Geometry(size)


class CubeModel:
    """Modelo lógico de un cubo Rubik de arista N basado en piezas (bricks).

    Representación:
        - Cada pieza de la superficie tiene una posición `(x, y, z)` con
          coordenadas en `0..N-1` y un `hue` = colores que muestra hacia
          +X, -X, +Y, -Y, +Z, -Z.
        - En el cubo resuelto todas las piezas tienen el mismo `hue`
          (`SOLVED_HUE`); la posición y la orientación cambian al girar.
        - El estado es inmutable: `moved()` devuelve un cubo nuevo. Las piezas
          conservan su índice, así que dos cubos son iguales si cada pieza
          está en la misma posición y con la misma orientación.
        - Internamente cada pieza es un entero (ver `_Geometry`), así copiar y
          comparar estados es barato.

    Ejes:
        - x: izquierda (0) -> derecha (N-1)
        - y: abajo (0) -> arriba (N-1)
        - z: atrás (0) -> adelante (N-1)
    """

    FACES: List[Face] = ["U", "D", "L", "R", "F", "B"]

    __slots__ = ("size", "codes", "_geo")

    def __init__(self, size: int = 3, codes: Optional[Tuple[int, ...]] = None) -> None:
        """Crea un cubo de arista `size`, resuelto salvo que se pasen los códigos.

        Args:
            size: Arista del cubo (1..MAX_SIZE).
            codes: Piezas codificadas de un estado ya calculado (uso interno).

        Raises:
            ValueError: Si `size` está fuera de rango.
        """
        if not 0 < size <= MAX_SIZE:
            raise ValueError(f"Tamaño de cubo inválido: {size} (1..{MAX_SIZE})")
        self.size = size
        self._geo = geometry(size)
        if codes is None:
            codes = tuple(self._geo.encode(*pos, SOLVED_HUE) for pos in self._geo.positions)
        self.codes: Tuple[int, ...] = codes

    @classmethod
    def solved(cls, size: int) -> "CubeModel":
        return cls(size)

    # --------------------------
    # Public API
    # --------------------------
    def moved(self, move: Move) -> "CubeModel":
        """Devuelve un cubo nuevo con el movimiento aplicado.

        Args:
            move: Movimiento a aplicar. Con `layer=None` gira el cubo completo.

        Returns:
            Nuevo `CubeModel`; `self` no se modifica.

        Raises:
            ValueError: Si el eje, la capa o el giro no son válidos.
        """
        if move.axis not in AXIS_INDEX:
            raise ValueError(f"Eje inválido: {move.axis!r}")
        if not move.is_whole_cube and not 0 <= move.layer < self.size:
            raise ValueError(f"Capa fuera de rango: {move.layer} (0..{self.size - 1})")
        if move.turns == 0:
            raise ValueError("El giro no puede ser 0")

        # Normalizamos a 1..3 giros en el sentido más corto
        t = move.turns % 4
        if t == 0:
            return self
        step = -1 if t == 3 else +1
        tbl = self._geo.table(move.axis, move.layer, step)

        codes = tuple([tbl[c] for c in self.codes])
        if t == 2:
            codes = tuple([tbl[c] for c in codes])
        return CubeModel(self.size, codes)

    def apply_sequence(self, moves: Iterable[Move]) -> "CubeModel":
        """Aplica una secuencia de movimientos en orden y devuelve el cubo resultante."""
        cube = self
        for mv in moves:
            cube = cube.moved(mv)
        return cube

    def bricks(self) -> List[Brick]:
        """Piezas decodificadas `(x, y, z, hue)`, en su orden fijo."""
        return [self._geo.decode(c) for c in self.codes]

    def is_solved(self) -> bool:
        """Indica si cada cara muestra un solo color.

        Un cubo girado completo también cuenta como resuelto.
        """
        for grid in self.facets().values():
            first = grid[0][0]
            if any(c != first for row in grid for c in row):
                return False
        return True

    def to_hashable(self) -> CubeHash:
        return (self.size, self.codes)

    def facets(self) -> Dict[Face, List[List[Color]]]:
        """Devuelve los colores visibles de cada cara como una grilla NxN.

        Orientación (vista desenrollada, U arriba de F y D debajo):
            - F: fila 0 arriba, columna 0 a la izquierda (x creciente)
            - B: visto desde atrás (x decreciente)
            - R: z decreciente; L: z creciente
            - U: fila 0 al fondo (z=0); D: fila 0 al frente (z=N-1)

        Returns:
            Diccionario cara -> lista de filas de colores.
        """
        n = self.size
        m = n - 1
        grids: Dict[Face, List[List[Color]]] = {
            f: [[""] * n for _ in range(n)] for f in self.FACES
        }
        for x, y, z, hue in self.bricks():
            if z == m:
                grids["F"][m - y][x] = hue[ZP]
            if z == 0:
                grids["B"][m - y][m - x] = hue[ZN]
            if x == m:
                grids["R"][m - y][m - z] = hue[XP]
            if x == 0:
                grids["L"][m - y][z] = hue[XN]
            if y == m:
                grids["U"][z][x] = hue[YP]
            if y == 0:
                grids["D"][m - z][x] = hue[YN]
        return grids

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CubeModel):
            return NotImplemented
        return self.size == other.size and self.codes == other.codes

    def __hash__(self) -> int:
        return hash(self.to_hashable())

    def __repr__(self) -> str:
        return f"CubeModel(size={self.size}, solved={self.is_solved()})"


def apply(state: CubeModel, move: Move) -> CubeModel:
    """Aplica un movimiento a un estado y devuelve el estado nuevo."""
    return state.moved(move)

