"""
SquareMatrix — плотная квадратная матрица целых чисел n×n

Хранение: плоский список длины n², row-major
(элемент (row, col) хранится по индексу row * n + col).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(elements) == dimension * dimension всегда
2. dimension >= 0, фиксируется при создании и никогда не меняется
3. Value semantics: copy() выделяет независимое хранилище, алиасинга нет
4. Арифметика (+, *) никогда не мутирует операнды
5. Несовпадение размерностей в арифметике → DimensionMismatch (fail loudly)
6. Неполное заполнение → FillStatus.INCOMPLETE_FILL (возврат, не exception)

ДОСТУП К ЭЛЕМЕНТАМ (двухуровневый контракт):
- at / set_at: без проверки границ (ответственность вызывающего кода)
- in_bounds / get / try_set: с проверкой границ, индикатор неудачи вместо exception
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, TextIO

from sqmatrix.core.domain.formatting import render_matrix, write_matrix


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DimensionMismatch(ValueError):
    """
    Размерности операндов арифметической операции не совпадают.

    Операнды при этом не изменяются. Вызывающий код должен
    перехватить ошибку, сообщить о ней и продолжить работу.
    """

    def __init__(self, operation: str, left: int, right: int):
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"Matrix sizes do not match for {operation}: {left}x{left} vs {right}x{right}."
        )


# =============================================================================
# FILL RESULT
# =============================================================================


class FillStatus(str, Enum):
    """Статус bulk-заполнения матрицы"""

    COMPLETE = "complete"
    INCOMPLETE_FILL = "incomplete_fill"


@dataclass(frozen=True)
class FillResult:
    """Результат SquareMatrix.fill."""

    status: FillStatus
    consumed: int  # Сколько значений фактически прочитано
    expected: int  # dimension²

    @property
    def complete(self) -> bool:
        return self.status == FillStatus.COMPLETE


# =============================================================================
# VALIDATION
# =============================================================================


def _require_int(value: object, what: str) -> int:
    # bool является подклассом int, но элементом матрицы быть не может
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}: {value!r}")
    return value


# =============================================================================
# SQUARE MATRIX
# =============================================================================


class SquareMatrix:
    """
    Плотная квадратная матрица целых чисел.

    Создание:
        SquareMatrix()      — пустая матрица (dimension == 0)
        SquareMatrix(n)     — n×n, все элементы равны 0
        SquareMatrix.from_rows([[1, 2], [3, 4]])
        SquareMatrix.identity(n)

    Элементы — Python int (без переполнения).
    """

    __slots__ = ("_dimension", "_data")

    # Mutable → не хэшируется
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, dimension: int = 0):
        _require_int(dimension, "dimension")
        if dimension < 0:
            raise ValueError(f"dimension must be non-negative, got {dimension}")

        self._dimension = dimension
        self._data: list[int] = [0] * (dimension * dimension)

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "SquareMatrix":
        """
        Создание матрицы из вложенных строк.

        Args:
            rows: n строк по n целых чисел

        Returns:
            Новая матрица n×n

        Raises:
            ValueError: Если строки не образуют квадратную сетку
            TypeError: Если элемент не целое число
        """
        grid = [list(row) for row in rows]
        n = len(grid)
        for i, row in enumerate(grid):
            if len(row) != n:
                raise ValueError(
                    f"row {i} has {len(row)} elements, expected {n} for a square matrix"
                )

        matrix = cls(n)
        for i, row in enumerate(grid):
            for j, value in enumerate(row):
                matrix._data[i * n + j] = _require_int(value, "element")
        return matrix

    @classmethod
    def identity(cls, dimension: int) -> "SquareMatrix":
        """Единичная матрица dimension×dimension."""
        matrix = cls(dimension)
        for i in range(dimension):
            matrix._data[i * dimension + i] = 1
        return matrix

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def elements(self) -> tuple[int, ...]:
        """Snapshot элементов в row-major порядке."""
        return tuple(self._data)

    def rows(self) -> list[list[int]]:
        """Snapshot в виде вложенных списков (независимая копия)."""
        n = self._dimension
        return [self._data[i * n:(i + 1) * n] for i in range(n)]

    def copy(self) -> "SquareMatrix":
        """Независимая копия (собственное хранилище)."""
        clone = SquareMatrix.__new__(SquareMatrix)
        clone._dimension = self._dimension
        clone._data = list(self._data)
        return clone

    # -------------------------------------------------------------------------
    # Unchecked access
    # -------------------------------------------------------------------------

    def at(self, row: int, col: int) -> int:
        """
        Значение элемента (row, col) без проверки границ.

        Вызывающий код обязан гарантировать 0 <= row, col < dimension.
        Отрицательные индексы не отклоняются.
        """
        return self._data[row * self._dimension + col]

    def set_at(self, row: int, col: int, value: int) -> None:
        """Запись элемента (row, col) без проверки границ."""
        self._data[row * self._dimension + col] = _require_int(value, "element")

    # -------------------------------------------------------------------------
    # Checked access
    # -------------------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        """True если 0 <= row, col < dimension."""
        n = self._dimension
        return 0 <= row < n and 0 <= col < n

    def get(self, row: int, col: int) -> Optional[int]:
        """Значение элемента или None, если индекс вне диапазона."""
        if not self.in_bounds(row, col):
            return None
        return self.at(row, col)

    def try_set(self, row: int, col: int, value: int) -> bool:
        """
        Запись элемента с проверкой границ.

        Returns:
            False если индекс вне диапазона (матрица не изменена), иначе True
        """
        if not self.in_bounds(row, col):
            return False
        self.set_at(row, col, value)
        return True

    # -------------------------------------------------------------------------
    # Bulk fill
    # -------------------------------------------------------------------------

    def fill(self, source: Iterable[int]) -> FillResult:
        """
        Заполнение из последовательного источника в row-major порядке.

        Читается ровно dimension² значений. Если источник исчерпан раньше,
        заполнение останавливается: матрица остаётся частично заполненной,
        и вызывающий код обязан проверить результат перед использованием.

        Из источника не читается ни одного лишнего значения, поэтому
        один итератор можно использовать для нескольких матриц подряд.

        Args:
            source: Итерируемый источник целых чисел

        Returns:
            FillResult со статусом COMPLETE или INCOMPLETE_FILL

        Raises:
            TypeError: Если источник выдал не целое число
        """
        expected = len(self._data)
        iterator = iter(source)
        sentinel = object()

        for index in range(expected):
            value = next(iterator, sentinel)
            if value is sentinel:
                return FillResult(
                    status=FillStatus.INCOMPLETE_FILL, consumed=index, expected=expected
                )
            self._data[index] = _require_int(value, "element")

        return FillResult(status=FillStatus.COMPLETE, consumed=expected, expected=expected)

    # -------------------------------------------------------------------------
    # Printing
    # -------------------------------------------------------------------------

    def write(self, sink: TextIO) -> None:
        """Вывод выровненной сетки в текстовый sink."""
        write_matrix(self, sink)

    def render(self) -> str:
        return render_matrix(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SquareMatrix.from_rows({self.rows()!r})"

    # -------------------------------------------------------------------------
    # Diagonals
    # -------------------------------------------------------------------------

    def main_diagonal_sum(self) -> int:
        """Σ element(i, i). Для dimension == 0 возвращает 0."""
        return sum(self.at(i, i) for i in range(self._dimension))

    def secondary_diagonal_sum(self) -> int:
        """Σ element(i, dimension - 1 - i). Для dimension == 0 возвращает 0."""
        n = self._dimension
        return sum(self.at(i, n - 1 - i) for i in range(n))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "SquareMatrix":
        """
        Поэлементная сумма.

        Raises:
            DimensionMismatch: Если размерности различаются
        """
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        if self._dimension != other._dimension:
            raise DimensionMismatch("addition", self._dimension, other._dimension)

        result = SquareMatrix(self._dimension)
        result._data = [a + b for a, b in zip(self._data, other._data)]
        return result

    def __mul__(self, other: object) -> "SquareMatrix":
        """
        Матричное произведение: result[i][j] = Σ_k self[i][k] * other[k][j].

        Умножение разрешено только для матриц одинаковой размерности
        (для квадратных матриц это совпадает с общим правилом cols(A) == rows(B)).

        Raises:
            DimensionMismatch: Если размерности различаются
        """
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        if self._dimension != other._dimension:
            raise DimensionMismatch("multiplication", self._dimension, other._dimension)

        n = self._dimension
        result = SquareMatrix(n)
        for i in range(n):
            for j in range(n):
                total = 0
                for k in range(n):
                    total += self.at(i, k) * other.at(k, j)
                result._data[i * n + j] = total
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._dimension == other._dimension and self._data == other._data
