# -*- coding: utf-8 -*-
"""sudoku_grid

Tablero 9x9 de Sudoku: almacenamiento, conversiones geométricas entre celdas
y subcuadros (áreas 3x3) y detección de dígitos repetidos.

Convención de coordenadas: siempre ``(fila, columna)``.
"""

from typing import Iterable, List, Optional, Sequence, Tuple
import numpy as np

SIZE = 9
AREA_SIZE = 3

Cell = Tuple[int, int]


def _has_duplicate(values: Iterable[int]) -> bool:
    """``True`` si algún dígito distinto de cero aparece dos veces."""
    seen = set()
    for v in values:
        if v == 0:
            continue
        if v in seen:
            return True
        seen.add(v)
    return False


class Grid:
    """Tablero de Sudoku con ceros en las casillas vacías.

    Las lecturas y escrituras fuera del tablero se ignoran (lectura -> 0),
    y ``set_all`` no hace nada si los datos no son exactamente 9x9.
    """

    def __init__(self, data: Optional[Sequence[Sequence[int]]] = None):
        self._cells = np.zeros((SIZE, SIZE), dtype=np.int64)
        if data is not None:
            self.set_all(data)

    # --------------------------
    # Acceso a celdas
    # --------------------------
    @staticmethod
    def _in_bounds(cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < SIZE and 0 <= c < SIZE

    def get(self, cell: Cell) -> int:
        if not self._in_bounds(cell):
            return 0
        r, c = cell
        return int(self._cells[r, c])

    def set(self, cell: Cell, value: int) -> None:
        if self._in_bounds(cell):
            r, c = cell
            self._cells[r, c] = value

    def set_all(self, data: Sequence[Sequence[int]]) -> None:
        """Reemplaza el tablero completo solo si ``data`` es 9x9."""
        if len(data) != SIZE or any(not hasattr(row, "__len__") or len(row) != SIZE for row in data):
            return
        self._cells = np.array(data, dtype=np.int64)

    def copy(self) -> "Grid":
        clone = Grid()
        clone._cells = self._cells.copy()
        return clone

    def to_list(self) -> List[List[int]]:
        return self._cells.tolist()

    def empty_cells(self) -> int:
        return int(np.count_nonzero(self._cells == 0))

    def is_complete(self) -> bool:
        return self.empty_cells() == 0

    # --------------------------
    # Geometría de áreas
    # --------------------------
    @staticmethod
    def area_origin_from_cell(cell: Cell) -> Cell:
        """Esquina superior izquierda del área que contiene ``cell``, p.ej. (4,7) -> (3,6)."""
        r, c = cell
        return (r // AREA_SIZE) * AREA_SIZE, (c // AREA_SIZE) * AREA_SIZE

    @staticmethod
    def area_index_2d(i: int) -> Cell:
        """Índice lineal de área (0..8) a índice 2D ``(fila, columna)``, p.ej. 5 -> (1,2)."""
        return i // AREA_SIZE, i % AREA_SIZE

    @staticmethod
    def area_origin_from_2d(index: Cell) -> Cell:
        """Índice 2D de área a celda de origen en el tablero, p.ej. (1,2) -> (3,6)."""
        ar, ac = index
        return ar * AREA_SIZE, ac * AREA_SIZE

    # --------------------------
    # Restricciones
    # --------------------------
    def row_has_conflict(self, row: int) -> bool:
        return _has_duplicate(self._cells[row, :].tolist())

    def column_has_conflict(self, col: int) -> bool:
        return _has_duplicate(self._cells[:, col].tolist())

    def area_has_conflict(self, origin: Cell) -> bool:
        r0, c0 = origin
        block = self._cells[r0:r0 + AREA_SIZE, c0:c0 + AREA_SIZE]
        return _has_duplicate(block.ravel().tolist())

    def has_conflict(self) -> bool:
        """Revisa las 9 filas, 9 columnas y 9 áreas del tablero."""
        for i in range(SIZE):
            if self.row_has_conflict(i):
                return True
            if self.column_has_conflict(i):
                return True
            if self.area_has_conflict(self.area_origin_from_2d(self.area_index_2d(i))):
                return True
        return False

    def has_conflict_at(self, cell: Cell) -> bool:
        """Revisa solo la fila, la columna y el área de ``cell``.

        No sustituye a ``has_conflict``: un error previo en otra zona del
        tablero pasa inadvertido.
        """
        r, c = cell
        return (self.row_has_conflict(r)
                or self.column_has_conflict(c)
                or self.area_has_conflict(self.area_origin_from_cell(cell)))

    def solve(self, **kwargs) -> Optional["Grid"]:
        """Atajo a ``sudoku_solver.solve``; no modifica este tablero."""
        from sudoku_solver import solve
        return solve(self, **kwargs)

    # --------------------------
    # Presentación
    # --------------------------
    def __str__(self) -> str:
        lines = []
        for r in range(SIZE):
            if r % AREA_SIZE == 0 and r != 0:
                lines.append("")
            parts = []
            for c in range(SIZE):
                if c % AREA_SIZE == 0 and c != 0:
                    parts.append("")
                parts.append(str(int(self._cells[r, c])))
            lines.append(" ".join(parts))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid({self.to_list()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    __hash__ = None
