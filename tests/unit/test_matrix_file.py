"""
Тесты для загрузки входного файла

Проверяет:
1. Текстовый формат: N + 2·N² целых
2. Сообщения об ошибках (невалидное N, нехватка данных, файл не открывается)
3. JSON формат и контракт matrix_pair
"""

import json

import pytest

from sqmatrix.core.domain import SquareMatrix
from sqmatrix.io import (
    MatrixFileError,
    MatrixPair,
    load_matrix_pair,
    matrix_pair_from_document,
    matrix_pair_to_document,
    parse_matrix_pair,
)


# =============================================================================
# ТЕСТЫ: текстовый формат
# =============================================================================


class TestParseText:
    """Тесты parse_matrix_pair"""

    def test_reference_example(self):
        pair = parse_matrix_pair("2\n1 2\n3 4\n5 6\n7 8\n")
        assert pair.dimension == 2
        assert pair.a.rows() == [[1, 2], [3, 4]]
        assert pair.b.rows() == [[5, 6], [7, 8]]

    def test_whitespace_layout_irrelevant(self):
        pair = parse_matrix_pair("  2 1\t2 3\n\n4 5 6 7 8")
        assert pair.b == SquareMatrix.from_rows([[5, 6], [7, 8]])

    def test_negative_values(self):
        pair = parse_matrix_pair("1 -5 +7")
        assert pair.a.at(0, 0) == -5
        assert pair.b.at(0, 0) == 7

    def test_trailing_tokens_ignored(self):
        pair = parse_matrix_pair("1 3 4 extra 99")
        assert pair.a.at(0, 0) == 3
        assert pair.b.at(0, 0) == 4

    @pytest.mark.parametrize(
        "text", ["", "0 1 1", "-2 1 2", "abc 1 2", "2.5 1 2", "1_0 1 2", "\u0662 1 2"]
    )
    def test_bad_dimension(self, text):
        with pytest.raises(MatrixFileError, match="positive integer N"):
            parse_matrix_pair(text)

    def test_not_enough_data_for_b(self):
        with pytest.raises(MatrixFileError, match="not enough matrix data"):
            parse_matrix_pair("2 1 2 3 4 5 6 7")

    def test_not_enough_data_for_a(self):
        with pytest.raises(MatrixFileError, match="not enough matrix data"):
            parse_matrix_pair("2 1 2 3")

    def test_non_integer_token_stops_data(self):
        with pytest.raises(MatrixFileError, match="not enough matrix data"):
            parse_matrix_pair("1 5 x 6")

    @pytest.mark.parametrize("token", ["1_000", "\u0663", "\uff17", "+-1"])
    def test_only_plain_ascii_integers(self, token):
        """Разделители '_' и не-ASCII цифры обрывают данные, как нечисловой токен"""
        with pytest.raises(MatrixFileError, match="not enough matrix data"):
            parse_matrix_pair(f"1 {token} 2")

    def test_explicit_sign_accepted(self):
        pair = parse_matrix_pair("+1 +3 -4")
        assert pair.a.at(0, 0) == 3
        assert pair.b.at(0, 0) == -4


# =============================================================================
# ТЕСТЫ: JSON формат
# =============================================================================


class TestJsonDocument:
    """Тесты matrix_pair_from_document / matrix_pair_to_document"""

    def test_from_document(self):
        pair = matrix_pair_from_document({"dimension": 1, "a": [[3]], "b": [[-4]]})
        assert pair.a.at(0, 0) == 3
        assert pair.b.at(0, 0) == -4

    def test_to_document(self):
        pair = MatrixPair(
            a=SquareMatrix.from_rows([[1, 2], [3, 4]]),
            b=SquareMatrix.from_rows([[5, 6], [7, 8]]),
        )
        document = matrix_pair_to_document(pair)
        assert document == {"dimension": 2, "a": [[1, 2], [3, 4]], "b": [[5, 6], [7, 8]]}
        assert matrix_pair_from_document(document).a == pair.a

    def test_schema_violation(self):
        with pytest.raises(MatrixFileError, match="invalid matrix document"):
            matrix_pair_from_document({"dimension": 1, "a": [[3]]})

    def test_not_square(self):
        with pytest.raises(MatrixFileError, match="invalid matrix document"):
            matrix_pair_from_document({"dimension": 2, "a": [[1, 2], [3]], "b": [[1, 2], [3, 4]]})

    def test_dimension_disagrees_with_grid(self):
        with pytest.raises(MatrixFileError, match="expected 3x3"):
            matrix_pair_from_document({"dimension": 3, "a": [[1]], "b": [[2]]})


# =============================================================================
# ТЕСТЫ: загрузка файлов
# =============================================================================


class TestLoadMatrixPair:
    """Тесты load_matrix_pair"""

    def test_text_file(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_text("2\n1 2\n3 4\n5 6\n7 8\n", encoding="utf-8")
        pair = load_matrix_pair(path)
        assert (pair.a * pair.b).rows() == [[19, 22], [43, 50]]

    def test_json_file(self, tmp_path):
        path = tmp_path / "input.json"
        path.write_text(
            json.dumps({"dimension": 2, "a": [[1, 2], [3, 4]], "b": [[5, 6], [7, 8]]}),
            encoding="utf-8",
        )
        pair = load_matrix_pair(str(path))
        assert (pair.a + pair.b).rows() == [[6, 8], [10, 12]]

    def test_json_file_malformed(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(MatrixFileError, match="invalid JSON"):
            load_matrix_pair(path)

    def test_json_top_level_not_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(MatrixFileError, match="must be an object"):
            load_matrix_pair(path)

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.txt"
        with pytest.raises(MatrixFileError, match="could not open file"):
            load_matrix_pair(path)

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(MatrixFileError, match="could not open file"):
            load_matrix_pair(tmp_path)

    def test_empty_name_reported_verbatim(self):
        with pytest.raises(MatrixFileError) as exc_info:
            load_matrix_pair("")
        assert str(exc_info.value) == "could not open file ''."
