"""cubus: simulación del cubo de Rubik de arista N y búsqueda de secuencias equivalentes."""

__version__ = "0.1.0"
