"""
Matrix File — загрузка пары матриц (A, B) из входного файла

Форматы:
1. Текстовый (по умолчанию): первый токен — положительное целое N,
   далее 2·N² целых чисел через пробельные символы (сначала A, затем B,
   row-major). Лишние токены в конце файла игнорируются.
2. JSON (суффикс .json): {"dimension": N, "a": [[...]], "b": [[...]]},
   проверяется по контракту matrix_pair.json.

Все ошибки загрузки → MatrixFileError.
"""

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Union

from jsonschema import ValidationError

from sqmatrix.core.contracts import validate_matrix_pair
from sqmatrix.core.domain import SquareMatrix

logger = logging.getLogger(__name__)

MSG_BAD_DIMENSION = "first value in file must be a positive integer N."
MSG_NOT_ENOUGH_DATA = "not enough matrix data in file."

# Десятичное целое в форме, которую принимает istream >> int
_INT_TOKEN = re.compile(r"[+-]?\d+", re.ASCII)


# =============================================================================
# EXCEPTIONS / RESULT
# =============================================================================


class MatrixFileError(Exception):
    """Входной файл не может быть прочитан или содержит невалидные данные."""

    pass


@dataclass(frozen=True)
class MatrixPair:
    """Две матрицы одинаковой размерности, прочитанные из одного файла."""

    a: SquareMatrix
    b: SquareMatrix

    @property
    def dimension(self) -> int:
        return self.a.dimension


# =============================================================================
# TEXT FORMAT
# =============================================================================


def _parse_int(token: str) -> Optional[int]:
    # int() принимает также "1_000" и не-ASCII цифры
    if _INT_TOKEN.fullmatch(token) is None:
        return None
    return int(token)


def _int_stream(tokens: Iterable[str]) -> Iterator[int]:
    # Поток обрывается на первом нечисловом токене (как чтение из istream)
    for token in tokens:
        value = _parse_int(token)
        if value is None:
            logger.debug("Non-integer token %r terminates matrix data", token)
            return
        yield value


def parse_matrix_pair(text: str) -> MatrixPair:
    """
    Разбор текстового формата.

    Args:
        text: Содержимое файла

    Returns:
        MatrixPair

    Raises:
        MatrixFileError: Если N невалидно или данных меньше 2·N²
    """
    tokens = iter(text.split())

    first = next(tokens, None)
    dimension = _parse_int(first) if first is not None else None
    if dimension is None or dimension <= 0:
        raise MatrixFileError(MSG_BAD_DIMENSION)

    stream = _int_stream(tokens)
    a = SquareMatrix(dimension)
    b = SquareMatrix(dimension)

    for name, matrix in (("A", a), ("B", b)):
        result = matrix.fill(stream)
        if not result.complete:
            logger.debug(
                "Matrix %s incomplete: %d of %d values", name, result.consumed, result.expected
            )
            raise MatrixFileError(MSG_NOT_ENOUGH_DATA)

    return MatrixPair(a=a, b=b)


# =============================================================================
# JSON FORMAT
# =============================================================================


def matrix_pair_from_document(document: Dict[str, Any]) -> MatrixPair:
    """
    Построение MatrixPair из JSON документа.

    Raises:
        MatrixFileError: Нарушение контракта matrix_pair или несовпадение N
    """
    try:
        validate_matrix_pair(document)
    except ValidationError as e:
        raise MatrixFileError(f"invalid matrix document: {e.message}") from e

    dimension = document["dimension"]
    try:
        a = SquareMatrix.from_rows(document["a"])
        b = SquareMatrix.from_rows(document["b"])
    except (TypeError, ValueError) as e:
        raise MatrixFileError(f"invalid matrix document: {e}") from e

    for name, matrix in (("a", a), ("b", b)):
        if matrix.dimension != dimension:
            raise MatrixFileError(
                f"invalid matrix document: matrix '{name}' is "
                f"{matrix.dimension}x{matrix.dimension}, expected {dimension}x{dimension}"
            )

    return MatrixPair(a=a, b=b)


def matrix_pair_to_document(pair: MatrixPair) -> Dict[str, Any]:
    """Обратное преобразование в JSON-совместимый dict."""
    return {"dimension": pair.dimension, "a": pair.a.rows(), "b": pair.b.rows()}


# =============================================================================
# FILE ENTRY POINT
# =============================================================================


def load_matrix_pair(path: Union[str, Path]) -> MatrixPair:
    """
    Загрузка пары матриц из файла (формат определяется по суффиксу).

    Args:
        path: Путь к файлу

    Returns:
        MatrixPair

    Raises:
        MatrixFileError: Файл не открывается или содержит невалидные данные
    """
    name = str(path)
    path = Path(path)
    try:
        if not name:
            raise FileNotFoundError("empty file name")
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read %r: %s", name, e)
        raise MatrixFileError(f"could not open file '{name}'.") from e

    logger.info("Loading matrices from %s", path)

    if path.suffix.lower() == ".json":
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise MatrixFileError(f"invalid JSON in '{path}': {e}") from e
        if not isinstance(document, dict):
            raise MatrixFileError("invalid matrix document: top-level value must be an object")
        pair = matrix_pair_from_document(document)
    else:
        pair = parse_matrix_pair(text)

    logger.info("Loaded two %dx%d matrices", pair.dimension, pair.dimension)
    return pair
