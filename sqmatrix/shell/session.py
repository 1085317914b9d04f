"""
Interactive session — консольная оболочка над SquareMatrix

Порядок работы:
1. Имя входного файла (аргумент CLI или запрос на stdin)
2. Загрузка A и B (ошибка загрузки → exit code 1)
3. Вывод A, B, A + B, A * B (ошибки арифметики не фатальны)
4. Суммы диагоналей A
5. Запросы параметров swap rows / swap columns / update element
   (невалидный ввод → значения по умолчанию)
6. Вывод преобразованных копий и исходной A (не изменена)
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence, TextIO

from sqmatrix.core.domain import DimensionMismatch, SquareMatrix
from sqmatrix.core.math import (
    DEFAULT_SWAP_COLUMNS,
    DEFAULT_SWAP_ROWS,
    DEFAULT_UPDATE_ELEMENT,
    SwapColumnsParams,
    SwapRowsParams,
    UpdateElementParams,
    apply_swap_columns,
    apply_swap_rows,
    apply_update_element,
)
from sqmatrix.io import MatrixFileError, MatrixPair, load_matrix_pair
from sqmatrix.logging_config import setup_logging
from sqmatrix.shell.prompts import prompt_filename, prompt_params

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SessionConfig:
    """Конфигурация сессии.

    interactive=False отключает запросы параметров (используются дефолты).
    """

    input_path: Optional[str] = None
    interactive: bool = True
    swap_rows: SwapRowsParams = field(default=DEFAULT_SWAP_ROWS)
    swap_columns: SwapColumnsParams = field(default=DEFAULT_SWAP_COLUMNS)
    update_element: UpdateElementParams = field(default=DEFAULT_UPDATE_ELEMENT)


# =============================================================================
# SESSION
# =============================================================================


class MatrixSession:
    """Одна сессия работы с парой матриц."""

    def __init__(
        self,
        config: SessionConfig = SessionConfig(),
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.config = config
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    # -------------------------------------------------------------------------
    # Output helpers
    # -------------------------------------------------------------------------

    def _out(self, text: str) -> None:
        self.stdout.write(text)

    def _err(self, text: str) -> None:
        self.stderr.write(text)

    def _show(self, title: str, matrix: SquareMatrix) -> None:
        self._out(f"\n{title}:\n")
        matrix.write(self.stdout)

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def load(self) -> Optional[MatrixPair]:
        path = self.config.input_path
        if path is None:
            path = prompt_filename(self.stdin, self.stdout)

        try:
            return load_matrix_pair(path)
        except MatrixFileError as e:
            self._err(f"Error: {e}\n")
            return None

    def show_arithmetic(self, a: SquareMatrix, b: SquareMatrix) -> None:
        try:
            total = a + b
            self._show("A + B", total)
        except DimensionMismatch as e:
            self._err(f"Addition error: {e}\n")

        try:
            product = a * b
            self._show("A * B", product)
        except DimensionMismatch as e:
            self._err(f"Multiplication error: {e}\n")

    def show_diagonals(self, a: SquareMatrix) -> None:
        self._out("\nDiagonal sums for Matrix A:\n")
        self._out(f"Main diagonal sum:      {a.main_diagonal_sum()}\n")
        self._out(f"Secondary diagonal sum: {a.secondary_diagonal_sum()}\n")

    def _ask(self, prompt, model, default, notice):
        if not self.config.interactive:
            return default
        result = prompt_params(self.stdin, self.stdout, prompt, model, default)
        if result.used_default:
            self._out(notice)
        return result.params

    def show_transforms(self, a: SquareMatrix) -> None:
        rows = self._ask(
            "\nEnter two row indices to swap (0-based, default 0 1): ",
            SwapRowsParams,
            self.config.swap_rows,
            "Using default row indices "
            f"{self.config.swap_rows.r1} and {self.config.swap_rows.r2}.\n",
        )
        self._show(f"Matrix A with rows {rows.r1} and {rows.r2} swapped", apply_swap_rows(a, rows))

        cols = self._ask(
            "\nEnter two column indices to swap (0-based, default 0 1): ",
            SwapColumnsParams,
            self.config.swap_columns,
            "Using default column indices "
            f"{self.config.swap_columns.c1} and {self.config.swap_columns.c2}.\n",
        )
        self._show(
            f"Matrix A with columns {cols.c1} and {cols.c2} swapped", apply_swap_columns(a, cols)
        )

        upd_default = self.config.update_element
        upd = self._ask(
            "\nEnter row, column, and new value to update (default 0 0 100): ",
            UpdateElementParams,
            upd_default,
            f"Using default (row={upd_default.row}, col={upd_default.col}, "
            f"value={upd_default.value}).\n",
        )
        self._show(
            f"Matrix A after update at ({upd.row}, {upd.col}) = {upd.value}",
            apply_update_element(a, upd),
        )

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------

    def run(self) -> int:
        """
        Полный цикл сессии.

        Returns:
            Exit code: 0 при успехе, 1 если входной файл не загружен
        """
        pair = self.load()
        if pair is None:
            return EXIT_ERROR

        a, b = pair.a, pair.b
        self._show("Matrix A", a)
        self._show("Matrix B", b)

        self.show_arithmetic(a, b)
        self.show_diagonals(a)
        self.show_transforms(a)

        self._show("Original Matrix A (unchanged)", a)
        self.stdout.flush()
        return EXIT_OK


# =============================================================================
# CLI
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqmatrix",
        description="Read two square integer matrices and show their sum, product, "
        "diagonal sums and row/column/element transforms.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Input file: N followed by 2*N*N integers, or a .json matrix_pair document. "
        "Prompted for when omitted.",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not ask for transform parameters; use the defaults.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    config = SessionConfig(input_path=args.file, interactive=not args.no_prompt)
    logger.debug("Starting session with %s", config)
    return MatrixSession(config).run()
