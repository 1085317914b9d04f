"""
Тесты для форматирования сетки

Проверяет:
1. Ширину поля (знак учитывается, минимум 2)
2. Выравнивание вправо в поле width + 1
3. Маркер пустой матрицы
"""

import io

from sqmatrix.core.domain import (
    EMPTY_MATRIX_MARKER,
    MIN_ELEMENT_WIDTH,
    SquareMatrix,
    element_width,
    render_lines,
    render_matrix,
    write_matrix,
)


class TestElementWidth:
    """Тесты element_width"""

    def test_single_digit_floor(self):
        """Однозначные элементы → ширина не меньше MIN_ELEMENT_WIDTH"""
        assert element_width(SquareMatrix.from_rows([[1, 2], [3, 4]])) == MIN_ELEMENT_WIDTH

    def test_zero_matrix(self):
        assert element_width(SquareMatrix(3)) == 2

    def test_sign_counts(self):
        assert element_width(SquareMatrix.from_rows([[-100, 0], [0, 0]])) == 4

    def test_widest_element_wins(self):
        assert element_width(SquareMatrix.from_rows([[12345, -9], [7, 88]])) == 5


class TestRender:
    """Тесты render_matrix / render_lines / write_matrix"""

    def test_two_by_two(self):
        m = SquareMatrix.from_rows([[19, 22], [43, 50]])
        assert render_matrix(m) == " 19 22\n 43 50\n"

    def test_mixed_widths_right_aligned(self):
        m = SquareMatrix.from_rows([[1, -20], [300, 4]])
        assert render_lines(m) == ["   1 -20", " 300   4"]

    def test_every_line_newline_terminated(self):
        text = render_matrix(SquareMatrix.identity(4))
        assert text.endswith("\n")
        assert text.count("\n") == 4

    def test_empty_marker(self):
        assert EMPTY_MATRIX_MARKER == "[empty matrix]"
        assert render_matrix(SquareMatrix()) == "[empty matrix]\n"
        assert render_lines(SquareMatrix()) == ["[empty matrix]"]

    def test_write_matrix(self):
        sink = io.StringIO()
        write_matrix(SquareMatrix.from_rows([[7]]), sink)
        assert sink.getvalue() == "  7\n"
