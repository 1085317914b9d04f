"""
Formatting — текстовое представление SquareMatrix

Правила вывода сетки:
- Ширина поля = max(len(str(v))) по всем элементам (знак учитывается)
- Минимальная ширина = 2 (даже если все элементы однозначные)
- Каждый элемент выравнивается вправо в поле ширины width + 1
- Одна строка на каждую строку матрицы, каждая завершается '\\n'
- Матрица размерности 0 выводится как одна строка EMPTY_MATRIX_MARKER
"""

from typing import TYPE_CHECKING, Final, TextIO

if TYPE_CHECKING:
    from sqmatrix.core.domain.square_matrix import SquareMatrix


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Маркер пустой матрицы (dimension == 0)
EMPTY_MATRIX_MARKER: Final[str] = "[empty matrix]"

# Минимальная ширина элемента (выравнивание для однозначных значений)
MIN_ELEMENT_WIDTH: Final[int] = 2


# =============================================================================
# WIDTH
# =============================================================================


def element_width(matrix: "SquareMatrix") -> int:
    """
    Ширина самого длинного элемента в десятичной записи.

    Args:
        matrix: Матрица для анализа

    Returns:
        max(len(str(v))) с полом MIN_ELEMENT_WIDTH

    Examples:
        >>> element_width(SquareMatrix.from_rows([[1, 2], [3, 4]]))
        2
        >>> element_width(SquareMatrix.from_rows([[-100, 2], [3, 4]]))
        4
    """
    width = 0
    for value in matrix.elements:
        width = max(width, len(str(value)))
    return max(width, MIN_ELEMENT_WIDTH)


# =============================================================================
# RENDERING
# =============================================================================


def render_lines(matrix: "SquareMatrix") -> list[str]:
    """Строки сетки без завершающих переводов строки."""
    n = matrix.dimension
    if n == 0:
        return [EMPTY_MATRIX_MARKER]

    field = element_width(matrix) + 1
    return [
        "".join(str(matrix.at(row, col)).rjust(field) for col in range(n))
        for row in range(n)
    ]


def render_matrix(matrix: "SquareMatrix") -> str:
    """
    Полное текстовое представление матрицы.

    Returns:
        Сетка, где каждая строка завершается '\\n'

    Examples:
        >>> render_matrix(SquareMatrix.from_rows([[1, 2], [3, 4]]))
        '  1  2\\n  3  4\\n'
        >>> render_matrix(SquareMatrix())
        '[empty matrix]\\n'
    """
    return "".join(line + "\n" for line in render_lines(matrix))


def write_matrix(matrix: "SquareMatrix", sink: TextIO) -> None:
    """
    Запись сетки в текстовый sink (файл, sys.stdout, io.StringIO).

    Args:
        matrix: Матрица для вывода
        sink: Объект с методом write(str)
    """
    sink.write(render_matrix(matrix))
