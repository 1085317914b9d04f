"""
Transforms — copy-producing преобразования SquareMatrix

Операции:
- swap_rows: обмен двух строк
- swap_columns: обмен двух столбцов
- update_element: замена одного элемента

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Аргумент никогда не мутируется: каждая операция начинается с copy()
   и изменяет только копию
2. Невалидные индексы НЕ являются ошибкой: пишется диагностика (logger.warning)
   и возвращается неизменённая копия (best-effort, never crash)
3. r1 == r2 / c1 == c2 → неизменённая копия без диагностики

Параметры по умолчанию заданы явными immutable моделями
(DEFAULT_SWAP_ROWS, DEFAULT_SWAP_COLUMNS, DEFAULT_UPDATE_ELEMENT).
"""

import logging
from typing import Final

from pydantic import BaseModel, Field

from sqmatrix.core.domain.square_matrix import SquareMatrix

logger = logging.getLogger(__name__)


# =============================================================================
# PARAMETER MODELS
# =============================================================================


class SwapRowsParams(BaseModel):
    """Параметры swap_rows. Индексы 0-based, диапазон проверяется при применении."""

    r1: int = Field(0, description="Первая строка")
    r2: int = Field(1, description="Вторая строка")

    model_config = {"frozen": True}


class SwapColumnsParams(BaseModel):
    """Параметры swap_columns."""

    c1: int = Field(0, description="Первый столбец")
    c2: int = Field(1, description="Второй столбец")

    model_config = {"frozen": True}


class UpdateElementParams(BaseModel):
    """Параметры update_element."""

    row: int = Field(0, description="Строка элемента")
    col: int = Field(0, description="Столбец элемента")
    value: int = Field(100, description="Новое значение")

    model_config = {"frozen": True}


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_SWAP_ROWS: Final[SwapRowsParams] = SwapRowsParams()
DEFAULT_SWAP_COLUMNS: Final[SwapColumnsParams] = SwapColumnsParams()
DEFAULT_UPDATE_ELEMENT: Final[UpdateElementParams] = UpdateElementParams()


# =============================================================================
# TRANSFORMS
# =============================================================================


def _index_valid(index: int, dimension: int) -> bool:
    return 0 <= index < dimension


def swap_rows(
    matrix: SquareMatrix,
    r1: int = DEFAULT_SWAP_ROWS.r1,
    r2: int = DEFAULT_SWAP_ROWS.r2,
) -> SquareMatrix:
    """
    Копия матрицы с переставленными строками r1 и r2.

    Args:
        matrix: Исходная матрица (не изменяется)
        r1: Первая строка (default: 0)
        r2: Вторая строка (default: 1)

    Returns:
        Новая матрица. При невалидных индексах или r1 == r2 — копия без изменений.

    Examples:
        >>> swap_rows(SquareMatrix.from_rows([[1, 2], [3, 4]])).rows()
        [[3, 4], [1, 2]]
    """
    result = matrix.copy()
    n = result.dimension

    if not (_index_valid(r1, n) and _index_valid(r2, n)):
        logger.warning(
            "Invalid row indices for swapRows (%d, %d) on %dx%d matrix. No swap performed.",
            r1, r2, n, n,
        )
        return result

    if r1 == r2:
        return result

    for j in range(n):
        upper = result.at(r1, j)
        result.set_at(r1, j, result.at(r2, j))
        result.set_at(r2, j, upper)
    return result


def swap_columns(
    matrix: SquareMatrix,
    c1: int = DEFAULT_SWAP_COLUMNS.c1,
    c2: int = DEFAULT_SWAP_COLUMNS.c2,
) -> SquareMatrix:
    """
    Копия матрицы с переставленными столбцами c1 и c2.

    Контракт симметричен swap_rows.
    """
    result = matrix.copy()
    n = result.dimension

    if not (_index_valid(c1, n) and _index_valid(c2, n)):
        logger.warning(
            "Invalid column indices for swapColumns (%d, %d) on %dx%d matrix. No swap performed.",
            c1, c2, n, n,
        )
        return result

    if c1 == c2:
        return result

    for i in range(n):
        left = result.at(i, c1)
        result.set_at(i, c1, result.at(i, c2))
        result.set_at(i, c2, left)
    return result


def update_element(
    matrix: SquareMatrix,
    row: int = DEFAULT_UPDATE_ELEMENT.row,
    col: int = DEFAULT_UPDATE_ELEMENT.col,
    value: int = DEFAULT_UPDATE_ELEMENT.value,
) -> SquareMatrix:
    """
    Копия матрицы, в которой элемент (row, col) заменён на value.

    Args:
        matrix: Исходная матрица (не изменяется)
        row: Строка (default: 0)
        col: Столбец (default: 0)
        value: Новое значение (default: 100)

    Returns:
        Новая матрица. При невалидных индексах — копия без изменений.
    """
    result = matrix.copy()
    if not result.try_set(row, col, value):
        n = result.dimension
        logger.warning(
            "Invalid indices for updateElement (%d, %d) on %dx%d matrix. No update performed.",
            row, col, n, n,
        )
    return result


# =============================================================================
# PARAMETER-MODEL ENTRY POINTS
# =============================================================================


def apply_swap_rows(matrix: SquareMatrix, params: SwapRowsParams = DEFAULT_SWAP_ROWS) -> SquareMatrix:
    return swap_rows(matrix, params.r1, params.r2)


def apply_swap_columns(
    matrix: SquareMatrix, params: SwapColumnsParams = DEFAULT_SWAP_COLUMNS
) -> SquareMatrix:
    return swap_columns(matrix, params.c1, params.c2)


def apply_update_element(
    matrix: SquareMatrix, params: UpdateElementParams = DEFAULT_UPDATE_ELEMENT
) -> SquareMatrix:
    return update_element(matrix, params.row, params.col, params.value)
