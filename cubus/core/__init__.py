from cubus.core.cube_model import CubeModel, apply
from cubus.core.move import Move, inverse

__all__ = ["CubeModel", "Move", "apply", "inverse"]
