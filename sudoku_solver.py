# sudoku_solver.py
from dataclasses import dataclass, field
from typing import List, Optional
from rich.console import Console

from sudoku_grid import AREA_SIZE, SIZE, Cell, Grid

CandidateTable = List[List[List[int]]]


class InvalidPuzzleError(ValueError):
    """El tablero de entrada ya contiene dígitos repetidos."""


@dataclass
class SolveStats:
    """Contadores de la última búsqueda."""
    placements: int = 0   # dígitos colocados sin conflicto
    backtracks: int = 0   # celdas agotadas sin solución
    max_depth: int = 0


@dataclass
class SudokuSolver:
    """Resuelve un tablero de Sudoku por backtracking con heurística MRV.

    Parámetros
    ----------
    grid: Grid
        Tablero 9x9 con ceros en las casillas vacías. Nunca se modifica.
    verbose: bool, opcional
        Si es ``True`` se muestran mensajes del proceso.
    validate: bool, opcional
        Si es ``True`` se rechaza un tablero con dígitos repetidos
        (``InvalidPuzzleError``) antes de buscar.
    """
    grid: Grid
    verbose: bool = False
    validate: bool = True
    stats: SolveStats = field(default_factory=SolveStats, init=False)

    def __post_init__(self) -> None:
        self.console = Console()
        self._board: Optional[Grid] = None

    # --------------------------
    # API pública
    # --------------------------
    def solve(self) -> Optional[Grid]:
        """Devuelve una copia resuelta del tablero o ``None`` si no hay solución."""
        self.stats = SolveStats()
        if self.validate and self.grid.has_conflict():
            raise InvalidPuzzleError("El tablero tiene dígitos repetidos.")

        candidates = self.candidate_table(self.grid)
        dead = self._dead_cell(self.grid, candidates)
        if dead is not None:
            self._log(f"Sin candidatos en {dead}: Sudoku sin solución")
            return None

        self._board = self.grid.copy()
        if self._backtrack(candidates, depth=1):
            self._log(f"Resuelto con {self.stats.placements} colocaciones "
                      f"y {self.stats.backtracks} retrocesos "
                      f"(profundidad máxima {self.stats.max_depth})")
            return self._board
        self._log("Sudoku sin solución")
        return None

    @staticmethod
    def candidate_table(grid: Grid) -> CandidateTable:
        """Dígitos posibles de cada celda según sus vecinos ya colocados.

        Las celdas ocupadas tienen lista vacía. Cada lista es ascendente.
        """
        table = [[list(range(1, SIZE + 1)) for _ in range(SIZE)] for _ in range(SIZE)]
        for c in range(SIZE):
            for r in range(SIZE):
                value = grid.get((r, c))
                if value == 0:
                    continue
                table[r][c].clear()
                for k in range(SIZE):
                    _discard(table[r][k], value)
                    _discard(table[k][c], value)
                r0, c0 = grid.area_origin_from_cell((r, c))
                for i in range(r0, r0 + AREA_SIZE):
                    for j in range(c0, c0 + AREA_SIZE):
                        _discard(table[i][j], value)
        return table

    # --------------------------
    # Métodos internos
    # --------------------------
    def _backtrack(self, candidates: CandidateTable, depth: int) -> bool:
        self.stats.max_depth = max(self.stats.max_depth, depth)
        cell = self._select_cell(candidates)
        if cell is None:
            return True  # sin celdas por llenar
        r, c = cell
        for num in candidates[r][c]:
            self._board.set(cell, num)
            if not self._board.has_conflict_at(cell):
                self.stats.placements += 1
                self._log(f"Probando {num} en ({r},{c})")
                if self._backtrack(candidates, depth + 1):
                    return True
            self._board.set(cell, 0)
        self.stats.backtracks += 1
        self._log(f"Retrocediendo en ({r},{c})")
        return False

    def _select_cell(self, candidates: CandidateTable) -> Optional[Cell]:
        """Primera celda vacía con menos candidatos (heurística MRV).

        Recorre columna por columna; una celda con un único candidato se
        devuelve de inmediato y las celdas sin candidatos se ignoran.
        """
        best: Optional[Cell] = None
        best_count = 0
        board = self._board.to_list()
        for c in range(SIZE):
            for r in range(SIZE):
                if board[r][c] != 0:
                    continue
                count = len(candidates[r][c])
                if count == 1:
                    return r, c
                if count == 0:
                    continue
                if best is None or count < best_count:
                    best, best_count = (r, c), count
        return best

    @staticmethod
    def _dead_cell(grid: Grid, candidates: CandidateTable) -> Optional[Cell]:
        # La tabla es estática: una celda vacía sin candidatos nunca se llenará.
        for r in range(SIZE):
            for c in range(SIZE):
                if grid.get((r, c)) == 0 and not candidates[r][c]:
                    return r, c
        return None

    def _log(self, msg: str) -> None:
        if self.verbose:
            self.console.print(msg, style="bold cyan")


def _discard(values: List[int], value: int) -> None:
    if value in values:
        values.remove(value)


def solve(grid: Grid, verbose: bool = False, validate: bool = True) -> Optional[Grid]:
    """Resuelve ``grid`` sin modificarlo; ``None`` si no tiene solución."""
    return SudokuSolver(grid, verbose=verbose, validate=validate).solve()


if __name__ == "__main__":
    ejemplo = Grid([
        [5, 3, 0, 0, 7, 0, 0, 0, 0],
        [6, 0, 0, 1, 9, 5, 0, 0, 0],
        [0, 9, 8, 0, 0, 0, 0, 6, 0],
        [8, 0, 0, 0, 6, 0, 0, 0, 3],
        [4, 0, 0, 8, 0, 3, 0, 0, 1],
        [7, 0, 0, 0, 2, 0, 0, 0, 6],
        [0, 6, 0, 0, 0, 0, 2, 8, 0],
        [0, 0, 0, 4, 1, 9, 0, 0, 5],
        [0, 0, 0, 0, 8, 0, 0, 7, 9],
    ])
    solver = SudokuSolver(ejemplo, verbose=True)
    solucion = solver.solve()
    print(solucion)
