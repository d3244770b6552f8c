# -*- coding: utf-8 -*-
"""main

Resolución de Sudokus desde archivos de texto:
  1) Lectura del archivo (PuzzleLoader)
  2) Resolución con backtracking (SudokuSolver)
  3) Presentación del resultado y del tiempo empleado

Uso:
    python main.py [archivo ...] [--verbose] [--no-validate]
"""

import argparse
import os
import time
from typing import List, Optional

from rich import print
from tqdm import tqdm

from puzzle_loader import LoaderConfig, PuzzleLoader
from sudoku_solver import InvalidPuzzleError, SudokuSolver

FILE_NAME = "sudoku.txt"


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def solve_file(path: str, verbose: bool = False, validate: bool = True) -> bool:
    """Lee, resuelve e imprime un Sudoku. Devuelve ``True`` si se resolvió."""
    print(f"Leyendo archivo {path}.")
    try:
        grid = PuzzleLoader(LoaderConfig(path=path, verbose=verbose)).run()
    except FileNotFoundError:
        print(f"No se pudo leer el archivo en la ruta \"{os.path.abspath(path)}\".")
        return False

    print("Resolviendo el tablero.")
    start = time.perf_counter()
    try:
        solved = SudokuSolver(grid, verbose=verbose, validate=validate).solve()
    except InvalidPuzzleError as e:
        print(f"[red]Tablero inválido:[/red] {e}")
        return False

    if solved is None:
        print(f"No se pudo resolver, tardó {_elapsed_ms(start)} ms.")
        return False
    print(f"Resuelto correctamente en {_elapsed_ms(start)} ms.")
    print(str(solved))
    return True


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Resuelve Sudokus 9x9 leídos de archivos de texto.")
    ap.add_argument("paths", nargs="*", default=[FILE_NAME], help="Archivos con el tablero")
    ap.add_argument("--verbose", action="store_true", help="Muestra el proceso de búsqueda")
    ap.add_argument("--no-validate", dest="validate", action="store_false",
                    help="No rechaza tableros con dígitos repetidos")
    args = ap.parse_args(argv)

    path_iter = args.paths
    if args.verbose and len(args.paths) > 1:
        path_iter = tqdm(args.paths, desc="Resolviendo", ncols=80, colour="blue")

    results = [solve_file(p, verbose=args.verbose, validate=args.validate) for p in path_iter]
    return 0 if all(results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
