# -*- coding: utf-8 -*-
"""puzzle_loader

Lectura de un Sudoku desde texto: una fila por línea, valores separados por
espacios. Cualquier token que no sea un dígito 0-9 se toma como casilla vacía.
"""

from dataclasses import dataclass
from rich.console import Console

from sudoku_grid import Grid


def _parse_token(token: str) -> int:
    try:
        value = int(token)
    except ValueError:
        return 0
    return value if 0 <= value <= 9 else 0


def parse_grid(text: str) -> Grid:
    """Construye un ``Grid`` a partir del texto; las líneas en blanco se omiten."""
    grid = Grid()
    rows = [line for line in text.splitlines() if line.strip()]
    for r, line in enumerate(rows):
        for c, token in enumerate(line.split()):
            grid.set((r, c), _parse_token(token))
    return grid


def load_grid(path: str) -> Grid:
    with open(path, encoding="utf-8") as fh:
        return parse_grid(fh.read())


@dataclass
class LoaderConfig:
    """Configuración de lectura del archivo de Sudoku."""
    path: str = "sudoku.txt"
    verbose: bool = False


class PuzzleLoader:
    def __init__(self, config: LoaderConfig):
        self.config = config
        self.console = Console()

    def _log(self, msg: str) -> None:
        if self.config.verbose:
            self.console.print(msg, style="bold cyan")

    def run(self) -> Grid:
        """Lee el archivo configurado; lanza ``FileNotFoundError`` si no existe."""
        self._log(f"Leyendo {self.config.path}...")
        grid = load_grid(self.config.path)
        self._log(f"Tablero cargado con {grid.empty_cells()} casillas vacías.")
        return grid
